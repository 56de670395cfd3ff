"""
Componenti UI riutilizzabili per l'applicazione EcoBollo.

Questo modulo contiene componenti Streamlit e validatori di input condivisi
tra le schede dell'applicazione.
"""

from .ui_components import (
    format_currency,
    tabella_bollo,
    grafico_bollo,
    grafico_carburante,
    render_risultato_bollo,
    render_card_info,
    render_esito_validazione,
    COLORI_VEICOLI
)

from .validators import (
    validate_potenza,
    validate_anno_immatricolazione,
    validate_anni_proiezione,
    validate_consumo,
    validate_prezzo_carburante,
    validate_km_annui,
    parse_regione,
    parse_alimentazione,
    parse_classe_euro,
    ValidationError
)

__all__ = [
    # UI Components
    'format_currency',
    'tabella_bollo',
    'grafico_bollo',
    'grafico_carburante',
    'render_risultato_bollo',
    'render_card_info',
    'render_esito_validazione',
    'COLORI_VEICOLI',

    # Validators
    'validate_potenza',
    'validate_anno_immatricolazione',
    'validate_anni_proiezione',
    'validate_consumo',
    'validate_prezzo_carburante',
    'validate_km_annui',
    'parse_regione',
    'parse_alimentazione',
    'parse_classe_euro',
    'ValidationError'
]
