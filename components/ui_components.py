"""
Componenti UI riutilizzabili per Streamlit.

Contiene funzioni per rendering consistente di sequenze bollo, costi carburante
e riepiloghi del garage.
"""

import streamlit as st
import pandas as pd
import plotly.graph_objects as go
from typing import Optional, List

from modules.calculator_bollo import RisultatoAnno, totale_sequenza
from modules.calculator_carburante import RisultatoCarburante

COLORI_VEICOLI = ['#6366f1', '#f97316', '#10b981', '#ec4899', '#8b5cf6', '#0ea5e9', '#eab308']


def format_currency(valore: float, simbolo: str = "€", decimali: int = 2) -> str:
    """
    Formatta valore come valuta (formato italiano).

    Args:
        valore: Valore numerico
        simbolo: Simbolo valuta
        decimali: Numero decimali (3 per il costo al km)

    Returns:
        Stringa formattata, es. "1.234,56 €"
    """
    return f"{valore:,.{decimali}f} {simbolo}".replace(",", "X").replace(".", ",").replace("X", ".")


def tabella_bollo(risultati: List[RisultatoAnno]) -> pd.DataFrame:
    """DataFrame per la visualizzazione della sequenza bollo."""
    return pd.DataFrame([
        {
            "Anno": r.etichetta,
            "Importo": format_currency(r.importo),
            "Esente": "Sì" if r.esente else "No",
            "Nota": r.messaggio,
        }
        for r in risultati
    ], columns=["Anno", "Importo", "Esente", "Nota"])


def grafico_bollo(risultati: List[RisultatoAnno]) -> go.Figure:
    """Grafico a barre degli importi annui; gli anni esenti in verde."""
    fig = go.Figure(data=[
        go.Bar(
            x=[r.etichetta for r in risultati],
            y=[r.importo for r in risultati],
            marker_color=["#2E7D32" if r.esente else "#6366f1" for r in risultati],
            text=[format_currency(r.importo) for r in risultati],
            textposition="auto",
        )
    ])
    fig.update_layout(
        height=350,
        yaxis_title="€",
        showlegend=False,
        margin=dict(t=20, b=20)
    )
    return fig


def render_risultato_bollo(
    risultati: List[RisultatoAnno],
    mostra_dettagli: bool = True
) -> None:
    """
    Renderizza la sequenza bollo: totale, media, grafico e tabella.

    Args:
        risultati: Sequenza calcolata
        mostra_dettagli: Se mostrare la tabella anno per anno
    """
    if not risultati:
        st.info("Nessun risultato da mostrare.")
        return

    totali = totale_sequenza(risultati)
    anni_esenti = sum(1 for r in risultati if r.esente)

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric(label=f"Totale {len(risultati)} anni", value=format_currency(totali["totale"]))
    with col2:
        st.metric(label="Media annua", value=format_currency(totali["media_annua"]))
    with col3:
        st.metric(label="Anni esenti", value=str(anni_esenti))

    st.plotly_chart(grafico_bollo(risultati), use_container_width=True)

    if mostra_dettagli:
        st.dataframe(tabella_bollo(risultati), hide_index=True, use_container_width=True)


def grafico_carburante(proiezione: List[RisultatoCarburante]) -> go.Figure:
    """Andamento del costo cumulato di carburante."""
    fig = go.Figure(data=[
        go.Scatter(
            x=[f"Anno {p.anno}" for p in proiezione],
            y=[p.costo for p in proiezione],
            mode="lines+markers",
            fill="tozeroy",
            line=dict(color="#f97316"),
            name="Costo Cumulativo",
        )
    ])
    fig.update_layout(height=350, yaxis_title="€", margin=dict(t=20, b=20))
    return fig


def render_card_info(
    titolo: str,
    valore: str,
    descrizione: Optional[str] = None,
    icona: Optional[str] = None,
    colore: str = "blue"
) -> None:
    """
    Renderizza card informativa.

    Args:
        titolo: Titolo card
        valore: Valore principale
        descrizione: Descrizione aggiuntiva
        icona: Emoji icona
        colore: Colore sfondo ("blue", "green", "red", "orange")
    """
    colore_map = {
        "blue": "#E3F2FD",
        "green": "#E8F5E9",
        "red": "#FFEBEE",
        "orange": "#FFF3E0"
    }

    bg_color = colore_map.get(colore, "#E3F2FD")

    html = f"""
    <div style="
        background-color: {bg_color};
        padding: 15px;
        border-radius: 8px;
        border-left: 4px solid {colore};
        margin: 10px 0;
    ">
        <div style="font-size: 14px; color: #666;">
            {icona + ' ' if icona else ''}{titolo}
        </div>
        <div style="font-size: 24px; font-weight: bold; margin: 5px 0;">
            {valore}
        </div>
        {f'<div style="font-size: 12px; color: #888;">{descrizione}</div>' if descrizione else ''}
    </div>
    """
    st.markdown(html, unsafe_allow_html=True)


def render_esito_validazione(valido: bool, messaggio: Optional[str]) -> None:
    """Mostra il messaggio di un validatore (errore o avviso)."""
    if messaggio is None:
        return
    if valido:
        st.warning(messaggio, icon="⚠️")
    else:
        st.error(messaggio, icon="🚫")
