"""
Modulo di confronto costi tra i veicoli del garage.

Per ogni veicolo salvato proietta bollo + carburante su un orizzonte di N anni
e produce i dati per:
- grafico dei costi cumulati anno per anno
- riepilogo dei totali (bollo, carburante, complessivo)

Il bollo è ricalcolato con la preferenza di domiciliazione salvata per
ciascun veicolo; il costo del carburante è costante negli anni.

Autore: EcoBollo
Versione: 1.0.0
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

import pandas as pd

from modules.calculator_bollo import calcola_sequenza_bollo
from modules.garage import VeicoloSalvato

logger = logging.getLogger(__name__)


PARAMETRI_CONFRONTO = {
    "prezzo_carburante_medio": 1.85,  # €/L
    "consumo_default": 15.0,  # L/100km se non salvato
    "km_annui_default": 10000.0,
}


@dataclass
class AnnoConfronto:
    anno: int
    etichetta: str
    bollo: float
    carburante: float
    totale_annuo: float
    cumulato: float


@dataclass
class ProiezioneVeicolo:
    """Proiezione dei costi di un veicolo del garage."""
    veicolo: VeicoloSalvato
    anni: list[AnnoConfronto] = field(default_factory=list)
    costo_totale: float = 0.0

    @property
    def totale_bollo(self) -> float:
        return sum(a.bollo for a in self.anni)

    @property
    def totale_carburante(self) -> float:
        return sum(a.carburante for a in self.anni)


def costo_carburante_annuo(veicolo: VeicoloSalvato, prezzo_litro: Optional[float] = None) -> float:
    """Costo annuo carburante; consumo e km mancanti (o a zero) usano i default."""
    if prezzo_litro is None:
        prezzo_litro = PARAMETRI_CONFRONTO["prezzo_carburante_medio"]
    consumo = veicolo.consumo or PARAMETRI_CONFRONTO["consumo_default"]
    km = veicolo.km_annui or PARAMETRI_CONFRONTO["km_annui_default"]
    return (km / 100) * consumo * prezzo_litro


def calcola_proiezione_veicolo(
    veicolo: VeicoloSalvato,
    anni: int,
    anno_corrente: Optional[int] = None,
    prezzo_litro: Optional[float] = None
) -> ProiezioneVeicolo:
    """
    Calcola bollo, carburante e costo cumulato per un veicolo.

    Args:
        veicolo: Veicolo salvato
        anni: Orizzonte temporale (anni)
        anno_corrente: Primo anno della proiezione (default: anno in corso)
        prezzo_litro: Prezzo carburante (default: prezzo medio)

    Returns:
        ProiezioneVeicolo
    """
    sequenza = calcola_sequenza_bollo(
        potenza_kw=veicolo.potenza_kw,
        regione=veicolo.regione,
        alimentazione=veicolo.alimentazione,
        classe_euro=veicolo.classe_euro,
        anno_immatricolazione=veicolo.anno_immatricolazione,
        anni_proiezione=anni,
        domiciliazione=veicolo.domiciliazione,
        anno_corrente=anno_corrente,
    )

    carburante = costo_carburante_annuo(veicolo, prezzo_litro)

    proiezione = ProiezioneVeicolo(veicolo=veicolo)
    cumulato = 0.0
    for risultato in sequenza:
        totale_annuo = risultato.importo + carburante
        cumulato += totale_annuo
        proiezione.anni.append(AnnoConfronto(
            anno=risultato.anno,
            etichetta=risultato.etichetta,
            bollo=risultato.importo,
            carburante=carburante,
            totale_annuo=totale_annuo,
            cumulato=cumulato,
        ))

    proiezione.costo_totale = cumulato
    return proiezione


def confronta_veicoli(
    veicoli: list[VeicoloSalvato],
    anni: int,
    anno_corrente: Optional[int] = None,
    prezzo_litro: Optional[float] = None
) -> list[ProiezioneVeicolo]:
    """Proiezione dei costi per tutti i veicoli, nello stesso ordine."""
    logger.info(f"Confronto garage: {len(veicoli)} veicoli su {anni} anni")
    return [
        calcola_proiezione_veicolo(v, anni, anno_corrente, prezzo_litro)
        for v in veicoli
    ]


def dati_grafico_cumulato(proiezioni: list[ProiezioneVeicolo]) -> pd.DataFrame:
    """
    Tabella dei costi cumulati per il grafico a linee.

    Una riga per anno ("Anno 1", "Anno 2", ...), una colonna per veicolo
    (indicizzata per id) con il cumulato arrotondato all'euro.

    Returns:
        DataFrame con colonna "nome" e una colonna per ogni id veicolo
    """
    if not proiezioni:
        return pd.DataFrame(columns=["nome"])

    n_anni = len(proiezioni[0].anni)
    righe = []
    for i in range(n_anni):
        riga = {"nome": f"Anno {i + 1}"}
        for p in proiezioni:
            riga[p.veicolo.id] = round(p.anni[i].cumulato)
        righe.append(riga)

    return pd.DataFrame(righe)


def riepilogo_confronto(proiezioni: list[ProiezioneVeicolo]) -> pd.DataFrame:
    """
    Riepilogo dei totali per il grafico a barre.

    Returns:
        DataFrame con colonne nome, totale_bollo, totale_carburante, totale, id
    """
    colonne = ["nome", "totale_bollo", "totale_carburante", "totale", "id"]
    righe = [
        {
            "nome": p.veicolo.nome,
            "totale_bollo": round(p.totale_bollo, 2),
            "totale_carburante": round(p.totale_carburante, 2),
            "totale": round(p.costo_totale, 2),
            "id": p.veicolo.id,
        }
        for p in proiezioni
    ]
    return pd.DataFrame(righe, columns=colonne)


def veicolo_piu_economico(proiezioni: list[ProiezioneVeicolo]) -> Optional[ProiezioneVeicolo]:
    if not proiezioni:
        return None
    return min(proiezioni, key=lambda p: p.costo_totale)
