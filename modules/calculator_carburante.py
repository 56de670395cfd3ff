"""
Modulo per la stima dei costi di carburante.

Calcola costo annuo, litri consumati e costo al km a partire da consumo medio,
prezzo al litro e percorrenza annua, più la proiezione cumulata su più anni.

Autore: EcoBollo
Versione: 1.0.0
"""

import logging
from dataclasses import dataclass, asdict

# Configurazione logging
logging.basicConfig(level=logging.INFO, format='%(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


@dataclass
class RisultatoCarburante:
    """Valori cumulati alla fine dell'anno indicato."""
    anno: int
    km_totali: float
    litri: float
    costo: float

    def to_dict(self) -> dict:
        return asdict(self)


def _non_negativo(valore: float | None) -> float:
    # Campi vuoti o negativi del form valgono 0
    if valore is None or valore < 0:
        return 0.0
    return float(valore)


def calcola_costo_carburante(
    consumo_l_100km: float,
    prezzo_litro: float,
    km_annui: float
) -> dict:
    """
    Calcola i costi annui di carburante.

    Formula:
    - litri_annui = km_annui / 100 × consumo
    - costo_annuo = litri_annui × prezzo
    - costo_km = costo_annuo / km_annui (0 se km_annui = 0)

    Args:
        consumo_l_100km: Consumo medio (L/100km)
        prezzo_litro: Prezzo carburante (€/L)
        km_annui: Percorrenza annua (km)

    Returns:
        Dict con costo_annuo, litri_annui, costo_km
    """
    consumo = _non_negativo(consumo_l_100km)
    prezzo = _non_negativo(prezzo_litro)
    km = _non_negativo(km_annui)

    litri_annui = (km / 100) * consumo
    costo_annuo = litri_annui * prezzo
    costo_km = costo_annuo / km if km > 0 else 0.0

    return {
        "costo_annuo": round(costo_annuo, 2),
        "litri_annui": round(litri_annui, 1),
        "costo_km": round(costo_km, 3),
    }


def proiezione_carburante(
    consumo_l_100km: float,
    prezzo_litro: float,
    km_annui: float,
    anni: int
) -> list[RisultatoCarburante]:
    """
    Proiezione cumulata dei costi di carburante.

    Args:
        consumo_l_100km: Consumo medio (L/100km)
        prezzo_litro: Prezzo carburante (€/L)
        km_annui: Percorrenza annua (km)
        anni: Numero di anni della proiezione

    Returns:
        Lista di RisultatoCarburante per gli anni 1..anni
    """
    consumo = _non_negativo(consumo_l_100km)
    prezzo = _non_negativo(prezzo_litro)
    km = _non_negativo(km_annui)

    litri_annui = (km / 100) * consumo
    costo_annuo = litri_annui * prezzo

    logger.info(
        f"Proiezione carburante: {consumo} L/100km, {prezzo} €/L, {km:.0f} km/anno, {anni} anni"
    )

    return [
        RisultatoCarburante(
            anno=anno,
            km_totali=km * anno,
            litri=round(litri_annui * anno, 1),
            costo=round(costo_annuo * anno, 2),
        )
        for anno in range(1, anni + 1)
    ]
