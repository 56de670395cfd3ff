"""
Tabelle tariffarie per il calcolo del bollo auto (tassa automobilistica regionale).

Contiene:
- Tariffe base €/kW per classe ambientale Euro (fino a 100 kW e oltre)
- Coefficienti regionali applicati alla tariffa nazionale
- Sconti per pagamento con domiciliazione bancaria
- Anni di esenzione per veicoli elettrici e ibridi

Le tabelle sono raccolte in un'istanza di TabellaTariffe: per un nuovo anno
fiscale basta costruirne un'altra e passarla al calcolatore.

Fonte: tariffe medie nazionali 2024 (semplificate)

Autore: EcoBollo
Versione: 1.0.0
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict


# ============================================================================
# ENUMERAZIONI
# ============================================================================

class Regione(Enum):
    ABRUZZO = "Abruzzo"
    BASILICATA = "Basilicata"
    CALABRIA = "Calabria"
    CAMPANIA = "Campania"
    EMILIA_ROMAGNA = "Emilia Romagna"
    FRIULI_VENEZIA_GIULIA = "Friuli Venezia Giulia"
    LAZIO = "Lazio"
    LIGURIA = "Liguria"
    LOMBARDIA = "Lombardia"
    MARCHE = "Marche"
    MOLISE = "Molise"
    PIEMONTE = "Piemonte"
    PUGLIA = "Puglia"
    SARDEGNA = "Sardegna"
    SICILIA = "Sicilia"
    TOSCANA = "Toscana"
    TRENTINO_ALTO_ADIGE = "Trentino Alto Adige"
    UMBRIA = "Umbria"
    VALLE_D_AOSTA = "Valle d'Aosta"
    VENETO = "Veneto"


class Alimentazione(Enum):
    BENZINA = "Benzina"
    DIESEL = "Diesel"
    GPL = "GPL"
    METANO = "Metano"
    IBRIDA = "Ibrida"
    ELETTRICA = "Elettrica"


class ClasseEuro(Enum):
    EURO_0 = "Euro 0"
    EURO_1 = "Euro 1"
    EURO_2 = "Euro 2"
    EURO_3 = "Euro 3"
    EURO_4 = "Euro 4"
    EURO_5 = "Euro 5"
    EURO_6 = "Euro 6"


# ============================================================================
# STRUTTURE DATI
# ============================================================================

@dataclass(frozen=True)
class TariffaKw:
    """Tariffa €/kW per una classe Euro."""
    fino_100: float   # €/kW per i primi 100 kW
    oltre_100: float  # €/kW per la parte eccedente 100 kW


@dataclass(frozen=True)
class TabellaTariffe:
    """
    Dati tariffari di un anno fiscale.

    Tutte le ricerche sono totali: una voce mancante non genera errori ma
    ricade su un valore di default (classe più pulita, coefficiente neutro,
    nessuno sconto, nessuna esenzione).
    """
    anno_riferimento: int
    tariffe_base: Dict[ClasseEuro, TariffaKw]
    coefficienti_regionali: Dict[Regione, float]
    sconti_domiciliazione: Dict[Regione, float] = field(default_factory=dict)
    esenzione_ibride: Dict[Regione, int] = field(default_factory=dict)
    esenzione_ibride_default: int = 0
    esenzione_elettriche: int = 5
    classe_default: ClasseEuro = ClasseEuro.EURO_6

    def tariffa_base(self, classe: ClasseEuro) -> TariffaKw:
        """Tariffa €/kW per classe Euro; classi sconosciute usano la fascia più pulita."""
        tariffa = self.tariffe_base.get(classe)
        if tariffa is None:
            return self.tariffe_base[self.classe_default]
        return tariffa

    def coefficiente_regionale(self, regione: Regione) -> float:
        return self.coefficienti_regionali.get(regione, 1.0)

    def sconto_domiciliazione(self, regione: Regione) -> float:
        return self.sconti_domiciliazione.get(regione, 0.0)

    def anni_esenzione(self, alimentazione: Alimentazione, regione: Regione) -> int:
        """
        Anni di esenzione dalla data di immatricolazione.

        Args:
            alimentazione: Tipo di alimentazione del veicolo
            regione: Regione di residenza

        Returns:
            Numero di anni esenti (0 = mai esente)
        """
        if alimentazione == Alimentazione.ELETTRICA:
            return self.esenzione_elettriche
        if alimentazione == Alimentazione.IBRIDA:
            return self.esenzione_ibride.get(regione, self.esenzione_ibride_default)
        return 0


# ============================================================================
# TABELLA 2024
# ============================================================================

TARIFFE_BASE_2024 = {
    ClasseEuro.EURO_0: TariffaKw(fino_100=3.00, oltre_100=4.50),
    ClasseEuro.EURO_1: TariffaKw(fino_100=2.90, oltre_100=4.35),
    ClasseEuro.EURO_2: TariffaKw(fino_100=2.80, oltre_100=4.20),
    ClasseEuro.EURO_3: TariffaKw(fino_100=2.70, oltre_100=4.05),
    ClasseEuro.EURO_4: TariffaKw(fino_100=2.58, oltre_100=3.87),
    ClasseEuro.EURO_5: TariffaKw(fino_100=2.58, oltre_100=3.87),
    ClasseEuro.EURO_6: TariffaKw(fino_100=2.58, oltre_100=3.87),
}

# Moltiplicatori rispetto alla tariffa nazionale
COEFFICIENTI_REGIONALI_2024 = {
    Regione.ABRUZZO: 1.10,
    Regione.BASILICATA: 1.00,
    Regione.CALABRIA: 1.10,
    Regione.CAMPANIA: 1.15,
    Regione.EMILIA_ROMAGNA: 1.00,
    Regione.FRIULI_VENEZIA_GIULIA: 0.90,
    Regione.LAZIO: 1.10,
    Regione.LIGURIA: 1.10,
    Regione.LOMBARDIA: 1.00,
    Regione.MARCHE: 1.10,
    Regione.MOLISE: 1.10,
    Regione.PIEMONTE: 1.10,
    Regione.PUGLIA: 1.10,
    Regione.SARDEGNA: 1.00,
    Regione.SICILIA: 1.00,
    Regione.TOSCANA: 1.10,
    Regione.TRENTINO_ALTO_ADIGE: 0.90,
    Regione.UMBRIA: 1.10,
    Regione.VALLE_D_AOSTA: 1.00,
    Regione.VENETO: 1.10,
}

# Domiciliazione bancaria: solo le regioni elencate prevedono lo sconto
SCONTI_DOMICILIAZIONE_2024 = {
    Regione.LOMBARDIA: 0.15,
    Regione.EMILIA_ROMAGNA: 0.10,
    Regione.VENETO: 0.10,
    Regione.ABRUZZO: 0.10,
    Regione.MOLISE: 0.10,
    Regione.SARDEGNA: 0.10,
    Regione.TRENTINO_ALTO_ADIGE: 0.10,
}

ESENZIONE_IBRIDE_2024 = {
    Regione.LOMBARDIA: 5,
    Regione.VENETO: 3,
    Regione.PIEMONTE: 5,
    Regione.LAZIO: 0,
    Regione.EMILIA_ROMAGNA: 0,
    Regione.TOSCANA: 0,
}

TABELLA_2024 = TabellaTariffe(
    anno_riferimento=2024,
    tariffe_base=TARIFFE_BASE_2024,
    coefficienti_regionali=COEFFICIENTI_REGIONALI_2024,
    sconti_domiciliazione=SCONTI_DOMICILIAZIONE_2024,
    esenzione_ibride=ESENZIONE_IBRIDE_2024,
    esenzione_ibride_default=0,
    esenzione_elettriche=5,
)


def get_lista_regioni() -> list[str]:
    """Nomi delle regioni in ordine alfabetico."""
    return sorted(r.value for r in Regione)
