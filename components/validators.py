"""
Modulo per validazione input utente.

Il calcolatore del bollo non valida i dati: si aspetta valori già controllati.
Queste funzioni vanno chiamate dall'interfaccia prima del calcolo.
"""

from typing import Tuple, Optional
from datetime import date

from modules.tariffe_bollo import Alimentazione, ClasseEuro, Regione


class ValidationError(Exception):
    """Eccezione per errori di validazione input."""
    pass


ANNO_IMMATRICOLAZIONE_MIN = 1950
ANNI_PROIEZIONE_MAX = 20


def validate_potenza(
    potenza: float,
    min_value: float = 1.0,
    max_value: float = 1000.0,
    campo: str = "Potenza",
    unita: str = "kW"
) -> Tuple[bool, Optional[str]]:
    """
    Valida la potenza del veicolo.

    Args:
        potenza: Valore potenza da validare
        min_value: Valore minimo accettabile
        max_value: Valore massimo accettabile
        campo: Nome campo per messaggio errore
        unita: Unità di misura

    Returns:
        (valido, messaggio_errore)
    """
    if potenza <= 0:
        return False, f"❌ {campo} deve essere maggiore di zero"

    if potenza < min_value:
        return False, f"⚠️ {campo} troppo bassa (minimo: {min_value} {unita})"

    if potenza > max_value:
        return False, f"⚠️ {campo} eccessiva (massimo: {max_value} {unita}). Verificare valore."

    # Potenze elevate: spesso inserite in CV invece che in kW
    if potenza > 300:
        return True, f"⚠️ ATTENZIONE: {campo} elevata ({potenza} {unita}). Verificare che sia espressa in kW e non in CV."

    return True, None


def validate_anno_immatricolazione(
    anno: int,
    anno_corrente: Optional[int] = None,
    campo: str = "Anno immatricolazione"
) -> Tuple[bool, Optional[str]]:
    """
    Valida l'anno di immatricolazione.

    È ammesso al massimo l'anno successivo a quello corrente (preimmatricolazione).

    Args:
        anno: Anno da validare
        anno_corrente: Anno di riferimento (default: anno in corso)
        campo: Nome campo per messaggio errore

    Returns:
        (valido, messaggio_errore)
    """
    if anno_corrente is None:
        anno_corrente = date.today().year

    if anno < ANNO_IMMATRICOLAZIONE_MIN:
        return False, f"❌ {campo} non può essere anteriore al {ANNO_IMMATRICOLAZIONE_MIN}"

    if anno > anno_corrente + 1:
        return False, f"❌ {campo} non può essere posteriore al {anno_corrente + 1}"

    if anno > anno_corrente:
        return True, f"⚠️ ATTENZIONE: {campo} nel futuro. Il veicolo risulterà esente dove previsto."

    return True, None


def validate_anni_proiezione(anni: int) -> Tuple[bool, Optional[str]]:
    """Valida l'orizzonte della proiezione (1-20 anni)."""
    if anni < 1:
        return False, "❌ La proiezione deve coprire almeno 1 anno"

    if anni > ANNI_PROIEZIONE_MAX:
        return False, f"❌ La proiezione non può superare {ANNI_PROIEZIONE_MAX} anni"

    return True, None


def validate_consumo(
    consumo: float,
    max_value: float = 50.0,
    campo: str = "Consumo"
) -> Tuple[bool, Optional[str]]:
    """
    Valida il consumo medio (L/100km).

    Args:
        consumo: Consumo da validare
        max_value: Valore massimo accettabile
        campo: Nome campo

    Returns:
        (valido, messaggio_errore)
    """
    if consumo < 0:
        return False, f"❌ {campo} non può essere negativo"

    if consumo > max_value:
        return False, f"⚠️ {campo} eccessivo (massimo: {max_value} L/100km). Verificare valore."

    if consumo > 20:
        return True, f"⚠️ ATTENZIONE: {campo} molto elevato ({consumo} L/100km). Confermare il valore."

    return True, None


def validate_prezzo_carburante(
    prezzo: float,
    max_value: float = 5.0
) -> Tuple[bool, Optional[str]]:
    """Valida il prezzo del carburante (€/L)."""
    if prezzo < 0:
        return False, "❌ Prezzo carburante non può essere negativo"

    if prezzo > max_value:
        return False, f"⚠️ Prezzo carburante eccessivo (massimo: {max_value} €/L). Verificare valore."

    return True, None


def validate_km_annui(
    km: float,
    max_value: float = 200000.0
) -> Tuple[bool, Optional[str]]:
    """Valida la percorrenza annua."""
    if km < 0:
        return False, "❌ Percorrenza annua non può essere negativa"

    if km > max_value:
        return False, f"⚠️ Percorrenza annua eccessiva (massimo: {max_value:,.0f} km). Verificare valore."

    if km > 50000:
        return True, f"⚠️ ATTENZIONE: Percorrenza annua molto elevata ({km:,.0f} km). Confermare il valore."

    return True, None


def parse_regione(valore: str) -> Regione:
    """
    Converte il nome di una regione nell'enumerazione.

    Raises:
        ValidationError: regione non riconosciuta
    """
    try:
        return Regione(valore.strip())
    except ValueError:
        raise ValidationError(f"Regione non valida: '{valore}'")


def parse_alimentazione(valore: str) -> Alimentazione:
    """
    Converte il tipo di alimentazione nell'enumerazione.

    Raises:
        ValidationError: alimentazione non riconosciuta
    """
    try:
        return Alimentazione(valore.strip())
    except ValueError:
        raise ValidationError(f"Alimentazione non valida: '{valore}'")


def parse_classe_euro(valore: str) -> ClasseEuro:
    """
    Converte la classe ambientale nell'enumerazione.

    Raises:
        ValidationError: classe non riconosciuta
    """
    try:
        return ClasseEuro(valore.strip())
    except ValueError:
        raise ValidationError(f"Classe Euro non valida: '{valore}'")
