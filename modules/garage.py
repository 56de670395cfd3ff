"""
Modulo per la gestione del garage - veicoli salvati per il confronto costi.

Permette di:
- Salvare un veicolo con i dati di bollo e consumo su file JSON
- Caricare tutti i veicoli salvati
- Eliminare un veicolo per identificativo

Tutti i veicoli sono salvati in un unico file (lista JSON). Ogni operazione
rilegge il file, lo modifica e lo riscrive.

Versione: 1.0.0
"""

import json
import logging
import time
import uuid
from dataclasses import dataclass, field, asdict
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from modules.tariffe_bollo import Alimentazione, ClasseEuro, Regione

logger = logging.getLogger(__name__)

PERCORSO_GARAGE_DEFAULT = "data/garage.json"


@dataclass
class VeicoloSalvato:
    """Veicolo salvato nel garage."""
    nome: str
    potenza_kw: float
    regione: Regione
    alimentazione: Alimentazione
    classe_euro: ClasseEuro
    anno_immatricolazione: int
    consumo: Optional[float] = None  # L/100km
    km_annui: Optional[float] = None
    domiciliazione: bool = False
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    creato_il: int = field(default_factory=lambda: int(time.time() * 1000))

    def to_dict(self) -> Dict[str, Any]:
        dati = asdict(self)
        dati["regione"] = self.regione.value
        dati["alimentazione"] = self.alimentazione.value
        dati["classe_euro"] = self.classe_euro.value
        return dati

    @classmethod
    def from_dict(cls, dati: Dict[str, Any]) -> "VeicoloSalvato":
        """
        Ricostruisce un veicolo da un record JSON.

        Raises:
            KeyError, ValueError: record incompleto o con valori non validi
        """
        consumo = dati.get("consumo")
        km_annui = dati.get("km_annui")
        return cls(
            id=dati["id"],
            nome=dati["nome"],
            potenza_kw=float(dati["potenza_kw"]),
            regione=Regione(dati["regione"]),
            alimentazione=Alimentazione(dati["alimentazione"]),
            classe_euro=ClasseEuro(dati["classe_euro"]),
            anno_immatricolazione=int(dati["anno_immatricolazione"]),
            consumo=float(consumo) if consumo is not None else None,
            km_annui=float(km_annui) if km_annui is not None else None,
            domiciliazione=bool(dati.get("domiciliazione", False)),
            creato_il=int(dati.get("creato_il", 0)),
        )


class Garage:
    """Gestisce salvataggio, lettura ed eliminazione dei veicoli salvati."""

    def __init__(self, percorso: str | Path = PERCORSO_GARAGE_DEFAULT):
        """
        Inizializza il garage.

        Args:
            percorso: File JSON dove sono salvati i veicoli
        """
        self.percorso = Path(percorso)
        self.percorso.parent.mkdir(parents=True, exist_ok=True)

    def _leggi_record(self) -> List[Dict[str, Any]]:
        if not self.percorso.exists():
            return []

        with open(self.percorso, 'r', encoding='utf-8') as f:
            dati = json.load(f)

        if not isinstance(dati, list):
            raise ValueError(f"Formato garage non valido: attesa una lista in {self.percorso}")
        return dati

    def _scrivi_record(self, record: List[Dict[str, Any]]) -> None:
        with open(self.percorso, 'w', encoding='utf-8') as f:
            json.dump(record, f, indent=2, ensure_ascii=False)

    def lista_veicoli(self) -> List[VeicoloSalvato]:
        """
        Carica tutti i veicoli salvati, nell'ordine di inserimento.

        Returns:
            Lista veicoli (vuota se il file non esiste o non è leggibile)
        """
        try:
            record = self._leggi_record()
        except (OSError, ValueError) as e:
            logger.warning(f"Garage non leggibile ({self.percorso}): {e}")
            return []

        veicoli = []
        for dati in record:
            try:
                veicoli.append(VeicoloSalvato.from_dict(dati))
            except (KeyError, ValueError, TypeError) as e:
                # Skip record corrotti
                logger.warning(f"Record garage ignorato: {e}")
                continue

        return veicoli

    def salva_veicolo(
        self,
        potenza_kw: float,
        regione: Regione,
        alimentazione: Alimentazione,
        classe_euro: ClasseEuro,
        anno_immatricolazione: Optional[int] = None,
        nome: str = "",
        consumo: Optional[float] = None,
        km_annui: Optional[float] = None,
        domiciliazione: bool = False
    ) -> Tuple[bool, str, Optional[VeicoloSalvato]]:
        """
        Aggiunge un veicolo al garage.

        Args:
            potenza_kw: Potenza (kW)
            regione: Regione di residenza
            alimentazione: Tipo alimentazione
            classe_euro: Classe ambientale
            anno_immatricolazione: Anno immatricolazione (default: anno in corso)
            nome: Nome del veicolo (default: "Auto <alimentazione> <kW>kW")
            consumo: Consumo medio L/100km
            km_annui: Percorrenza annua
            domiciliazione: Preferenza domiciliazione bancaria

        Returns:
            (successo, messaggio, veicolo)
        """
        if anno_immatricolazione is None:
            anno_immatricolazione = date.today().year

        nome = (nome or "").strip() or f"Auto {alimentazione.value} {potenza_kw:g}kW"

        veicolo = VeicoloSalvato(
            nome=nome,
            potenza_kw=potenza_kw,
            regione=regione,
            alimentazione=alimentazione,
            classe_euro=classe_euro,
            anno_immatricolazione=anno_immatricolazione,
            consumo=consumo,
            km_annui=km_annui,
            domiciliazione=domiciliazione,
        )

        try:
            record = self._leggi_record()
            record.append(veicolo.to_dict())
            self._scrivi_record(record)
        except (OSError, ValueError) as e:
            logger.error(f"Errore salvataggio veicolo '{nome}': {e}")
            return False, f"Errore salvataggio: {str(e)}", None

        logger.info(f"Veicolo salvato nel garage: {nome} ({veicolo.id})")
        return True, f"Veicolo salvato: {nome}", veicolo

    def elimina_veicolo(self, veicolo_id: str) -> Tuple[bool, str]:
        """
        Elimina un veicolo dal garage.

        Args:
            veicolo_id: Identificativo del veicolo

        Returns:
            (successo, messaggio)
        """
        try:
            record = self._leggi_record()
            rimanenti = [r for r in record if r.get("id") != veicolo_id]

            if len(rimanenti) == len(record):
                return False, "Veicolo non trovato"

            self._scrivi_record(rimanenti)
        except (OSError, ValueError) as e:
            logger.error(f"Errore eliminazione veicolo {veicolo_id}: {e}")
            return False, f"Errore eliminazione: {str(e)}"

        logger.info(f"Veicolo eliminato dal garage: {veicolo_id}")
        return True, "Veicolo eliminato"

    def svuota(self) -> Tuple[bool, str]:
        """Elimina tutti i veicoli salvati."""
        try:
            self._scrivi_record([])
        except OSError as e:
            return False, f"Errore svuotamento: {str(e)}"
        return True, "Garage svuotato"


def get_garage() -> Garage:
    """
    Ottiene il garage con il percorso di default.

    Returns:
        Istanza Garage
    """
    return Garage()
