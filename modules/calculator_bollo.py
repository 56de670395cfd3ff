"""
Modulo per il calcolo del bollo auto anno per anno.

Dato un veicolo (potenza, regione, alimentazione, classe Euro, anno di
immatricolazione) restituisce la sequenza degli importi dovuti per un numero
di anni a partire dall'anno corrente, con stato di esenzione e nota esplicativa.

Regole applicate:
- Tariffa a scaglioni: €/kW fino a 100 kW, €/kW maggiorato oltre 100 kW
- Coefficiente regionale
- Elettriche: esenzione nazionale, poi 25% della tariffa
- Ibride: esenzione regionale (0 anni se la regione non la prevede)
- GPL/Metano: riduzione ecologica 25%
- Domiciliazione bancaria: sconto regionale sull'importo residuo

Autore: EcoBollo
Versione: 1.0.0
"""

import logging
from dataclasses import dataclass, asdict
from datetime import date
from typing import Optional

try:
    from modules.tariffe_bollo import (
        TABELLA_2024, TabellaTariffe, TariffaKw, Alimentazione, ClasseEuro, Regione
    )
except ImportError:
    from tariffe_bollo import (
        TABELLA_2024, TabellaTariffe, TariffaKw, Alimentazione, ClasseEuro, Regione
    )

# Configurazione logging
logging.basicConfig(level=logging.INFO, format='%(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


# ============================================================================
# PARAMETRI
# ============================================================================

PARAMETRI_BOLLO = {
    "soglia_kw": 100,  # kW oltre i quali si applica la tariffa maggiorata
    "quota_elettriche_post_esenzione": 0.25,  # 25% della tariffa piena
    "riduzione_gpl_metano": 0.75,  # si paga il 75%
}

ALIMENTAZIONI_ECOLOGICHE = (Alimentazione.GPL, Alimentazione.METANO)


# ============================================================================
# DATA CLASSES
# ============================================================================

@dataclass
class RisultatoAnno:
    """Importo del bollo per un singolo anno solare."""
    anno: int
    etichetta: str
    importo: float
    esente: bool
    messaggio: str
    sconto_domiciliazione: bool = False

    def to_dict(self) -> dict:
        return asdict(self)


# ============================================================================
# FUNZIONI DI CALCOLO
# ============================================================================

def calcola_importo_standard(
    potenza_kw: float,
    tariffa: TariffaKw,
    coefficiente_regionale: float
) -> float:
    """
    Calcola l'importo standard (non arrotondato) del bollo.

    Formula:
    - P ≤ 100 kW: P × tariffa_fino_100
    - P > 100 kW: 100 × tariffa_fino_100 + (P - 100) × tariffa_oltre_100

    Il risultato è moltiplicato per il coefficiente regionale.

    Args:
        potenza_kw: Potenza del veicolo (kW)
        tariffa: Tariffa €/kW della classe Euro
        coefficiente_regionale: Moltiplicatore regionale

    Returns:
        Importo in €
    """
    soglia = PARAMETRI_BOLLO["soglia_kw"]

    if potenza_kw <= soglia:
        totale = potenza_kw * tariffa.fino_100
    else:
        quota_base = soglia * tariffa.fino_100
        eccedenza = (potenza_kw - soglia) * tariffa.oltre_100
        totale = quota_base + eccedenza

    return totale * coefficiente_regionale


def calcola_sequenza_bollo(
    potenza_kw: float,
    regione: Regione,
    alimentazione: Alimentazione,
    classe_euro: ClasseEuro,
    anno_immatricolazione: int,
    anni_proiezione: int,
    domiciliazione: bool = False,
    anno_corrente: Optional[int] = None,
    tabella: TabellaTariffe = TABELLA_2024
) -> list[RisultatoAnno]:
    """
    Calcola il bollo per ciascuno degli anni di proiezione.

    L'età del veicolo può essere negativa (immatricolazione futura): in quel
    caso ricade sempre nella finestra di esenzione, se prevista.

    Args:
        potenza_kw: Potenza (kW)
        regione: Regione di residenza
        alimentazione: Tipo alimentazione
        classe_euro: Classe ambientale
        anno_immatricolazione: Anno di prima immatricolazione
        anni_proiezione: Numero di anni da calcolare
        domiciliazione: Pagamento con domiciliazione bancaria
        anno_corrente: Primo anno della proiezione (default: anno in corso)
        tabella: Tabella tariffaria da usare

    Returns:
        Lista di RisultatoAnno, lunga esattamente anni_proiezione
    """
    if anno_corrente is None:
        anno_corrente = date.today().year

    coefficiente = tabella.coefficiente_regionale(regione)
    tariffa = tabella.tariffa_base(classe_euro)
    anni_esenzione = tabella.anni_esenzione(alimentazione, regione)
    sconto = tabella.sconto_domiciliazione(regione)

    logger.info(
        f"Calcolo bollo: {potenza_kw} kW, {regione.value}, {alimentazione.value}, "
        f"{classe_euro.value}, immatricolazione {anno_immatricolazione}, "
        f"{anni_proiezione} anni dal {anno_corrente}"
    )

    risultati = []

    for i in range(anni_proiezione):
        anno = anno_corrente + i
        eta = anno - anno_immatricolazione

        esente = False
        importo = 0.0

        # 1. Esenzioni per alimentazione
        if alimentazione == Alimentazione.ELETTRICA:
            if eta < anni_esenzione:
                esente = True
                messaggio = f"Esenzione Elettrica ({eta + 1}/{anni_esenzione} anni)"
            else:
                importo = calcola_importo_standard(potenza_kw, tariffa, coefficiente)
                importo *= PARAMETRI_BOLLO["quota_elettriche_post_esenzione"]
                messaggio = "Tariffa ridotta (25%) post-esenzione"
        elif alimentazione == Alimentazione.IBRIDA:
            if eta < anni_esenzione:
                esente = True
                messaggio = f"Esenzione Ibrida ({eta + 1}/{anni_esenzione} anni)"
            else:
                importo = calcola_importo_standard(potenza_kw, tariffa, coefficiente)
                messaggio = "Tariffa standard"
        else:
            importo = calcola_importo_standard(potenza_kw, tariffa, coefficiente)
            messaggio = "Tariffa standard"

        # 2. Riduzione ecologica GPL/Metano (sostituisce la nota)
        if not esente and alimentazione in ALIMENTAZIONI_ECOLOGICHE:
            importo *= PARAMETRI_BOLLO["riduzione_gpl_metano"]
            messaggio = "Tariffa ridotta ecologica"

        # 3. Sconto domiciliazione bancaria
        sconto_applicato = False
        if not esente and domiciliazione and importo > 0 and sconto > 0:
            importo *= (1 - sconto)
            sconto_applicato = True

        if sconto_applicato:
            messaggio += f" + Sconto domiciliazione (-{sconto * 100:.0f}%)"

        if esente:
            importo = 0.0

        risultato = RisultatoAnno(
            anno=anno,
            etichetta=f"Anno {i + 1} ({anno})",
            importo=round(importo, 2),
            esente=esente,
            messaggio=messaggio,
            sconto_domiciliazione=sconto_applicato
        )
        logger.debug(f"  {risultato.etichetta}: {risultato.importo:.2f} € - {messaggio}")
        risultati.append(risultato)

    return risultati


def totale_sequenza(risultati: list[RisultatoAnno]) -> dict:
    """Totale e media annua di una sequenza di bolli."""
    if not risultati:
        return {"totale": 0.0, "media_annua": 0.0}

    totale = sum(r.importo for r in risultati)
    return {
        "totale": round(totale, 2),
        "media_annua": round(totale / len(risultati), 2),
    }


# ============================================================================
# TEST DEL MODULO
# ============================================================================

if __name__ == "__main__":
    print("=" * 70)
    print("TEST CALCOLO BOLLO AUTO")
    print("=" * 70)

    print("\n[TEST 1] Benzina 120 kW, Lombardia, Euro 6")
    for r in calcola_sequenza_bollo(
        120, Regione.LOMBARDIA, Alimentazione.BENZINA, ClasseEuro.EURO_6,
        2020, 3, anno_corrente=2024
    ):
        print(f"  {r.etichetta}: {r.importo:.2f} € ({r.messaggio})")

    print("\n[TEST 2] Stesso veicolo con domiciliazione")
    for r in calcola_sequenza_bollo(
        120, Regione.LOMBARDIA, Alimentazione.BENZINA, ClasseEuro.EURO_6,
        2020, 3, domiciliazione=True, anno_corrente=2024
    ):
        print(f"  {r.etichetta}: {r.importo:.2f} € ({r.messaggio})")

    print("\n[TEST 3] Elettrica 150 kW, Lazio, immatricolata 2021")
    for r in calcola_sequenza_bollo(
        150, Regione.LAZIO, Alimentazione.ELETTRICA, ClasseEuro.EURO_6,
        2021, 4, anno_corrente=2024
    ):
        print(f"  {r.etichetta}: {r.importo:.2f} € ({r.messaggio})")

    print("\n" + "=" * 70)
