"""
EcoBollo - Applicazione Streamlit
Interfaccia web per la stima del bollo auto e dei costi di carburante

Funzionalità:
- Calcolo bollo anno per anno (esenzioni, riduzioni, domiciliazione)
- Stima costi carburante con proiezione cumulata
- Garage: salvataggio veicoli e confronto dei costi complessivi

Autore: EcoBollo
Versione: 1.0.0
"""

from datetime import datetime

import streamlit as st
import plotly.graph_objects as go

from modules.tariffe_bollo import Alimentazione, ClasseEuro, Regione, get_lista_regioni
from modules.calculator_bollo import calcola_sequenza_bollo
from modules.calculator_carburante import calcola_costo_carburante, proiezione_carburante
from modules.garage import get_garage
from modules.confronto_garage import (
    confronta_veicoli, dati_grafico_cumulato, riepilogo_confronto,
    veicolo_piu_economico, PARAMETRI_CONFRONTO
)
from components.ui_components import (
    format_currency, render_risultato_bollo, grafico_carburante,
    render_card_info, render_esito_validazione, COLORI_VEICOLI
)
from components.validators import (
    validate_potenza, validate_anno_immatricolazione, validate_consumo,
    validate_prezzo_carburante, validate_km_annui
)

# ============================================================================
# CONFIGURAZIONE PAGINA
# ============================================================================

st.set_page_config(
    page_title="EcoBollo",
    page_icon="🚗",
    layout="wide",
    initial_sidebar_state="collapsed"
)

st.markdown("""
<style>
    .main-header {
        font-size: 2.5rem;
        font-weight: bold;
        color: #4F46E5;
        text-align: center;
        margin-bottom: 1rem;
    }
    .sub-header {
        font-size: 1.2rem;
        color: #666;
        text-align: center;
        margin-bottom: 2rem;
    }
    @media (max-width: 768px) {
        .main-header {
            font-size: 1.8rem;
        }
        .stButton button {
            width: 100%;
        }
    }
</style>
""", unsafe_allow_html=True)

# ============================================================================
# COSTANTI
# ============================================================================

VERSIONE = "1.0.0"

ANNI_PROIEZIONE_DEFAULT = 5
ORIZZONTE_CONFRONTO_DEFAULT = 10


# ============================================================================
# SESSION STATE
# ============================================================================

def init_session_state():
    """Inizializza i dati condivisi tra le schede."""
    anno_corrente = datetime.now().year
    if "veicolo" not in st.session_state:
        st.session_state.veicolo = {
            "nome": "",
            "potenza_kw": 0.0,
            "regione": None,
            "alimentazione": None,
            "classe_euro": None,
            "anno_immatricolazione": anno_corrente,
            "domiciliazione": False,
        }
    if "anni_proiezione" not in st.session_state:
        st.session_state.anni_proiezione = ANNI_PROIEZIONE_DEFAULT
    if "ultimo_bollo" not in st.session_state:
        st.session_state.ultimo_bollo = []


def reset_veicolo():
    """Azzera i dati del veicolo dopo il salvataggio nel garage."""
    del st.session_state["veicolo"]
    st.session_state.ultimo_bollo = []
    init_session_state()


def veicolo_completo() -> bool:
    v = st.session_state.veicolo
    return v["regione"] is not None and v["alimentazione"] is not None and v["classe_euro"] is not None


# ============================================================================
# SCHEDA BOLLO
# ============================================================================

def render_tab_bollo():
    st.subheader("🚗 Dati Veicolo")
    veicolo = st.session_state.veicolo
    anno_corrente = datetime.now().year

    col1, col2 = st.columns(2)
    with col1:
        veicolo["nome"] = st.text_input(
            "Nome veicolo (opzionale)", value=veicolo["nome"], placeholder="es. Panda di famiglia"
        )
        veicolo["potenza_kw"] = st.number_input(
            "Potenza (kW)", min_value=0.0, max_value=1000.0, step=1.0,
            value=float(veicolo["potenza_kw"]),
            help="La potenza in kW è indicata alla voce P.2 del libretto"
        )
        regioni = get_lista_regioni()
        nome_regione = st.selectbox(
            "Regione di residenza",
            options=["Seleziona..."] + regioni,
            index=regioni.index(veicolo["regione"].value) + 1 if veicolo["regione"] else 0,
        )
        veicolo["regione"] = Regione(nome_regione) if nome_regione != "Seleziona..." else None

    with col2:
        alimentazioni = [a.value for a in Alimentazione]
        nome_alimentazione = st.selectbox(
            "Alimentazione",
            options=["Seleziona..."] + alimentazioni,
            index=alimentazioni.index(veicolo["alimentazione"].value) + 1 if veicolo["alimentazione"] else 0,
        )
        veicolo["alimentazione"] = (
            Alimentazione(nome_alimentazione) if nome_alimentazione != "Seleziona..." else None
        )
        classi = [c.value for c in ClasseEuro]
        nome_classe = st.selectbox(
            "Classe ambientale",
            options=["Seleziona..."] + classi,
            index=classi.index(veicolo["classe_euro"].value) + 1 if veicolo["classe_euro"] else 0,
        )
        veicolo["classe_euro"] = ClasseEuro(nome_classe) if nome_classe != "Seleziona..." else None
        veicolo["anno_immatricolazione"] = int(st.number_input(
            "Anno immatricolazione", min_value=1950, max_value=anno_corrente + 1, step=1,
            value=int(veicolo["anno_immatricolazione"]),
        ))

    veicolo["domiciliazione"] = st.checkbox(
        "Pagamento con domiciliazione bancaria",
        value=veicolo["domiciliazione"],
        help="Alcune regioni prevedono uno sconto per il pagamento automatico"
    )

    st.session_state.anni_proiezione = st.slider(
        "Anni da calcolare", min_value=1, max_value=20, value=st.session_state.anni_proiezione
    )

    if not veicolo_completo():
        st.info("Seleziona regione, alimentazione e classe ambientale per calcolare il bollo.")
        return

    valido, msg = validate_potenza(veicolo["potenza_kw"])
    render_esito_validazione(valido, msg)
    valido_anno, msg_anno = validate_anno_immatricolazione(veicolo["anno_immatricolazione"])
    render_esito_validazione(valido_anno, msg_anno)
    if not (valido and valido_anno):
        return

    risultati = calcola_sequenza_bollo(
        potenza_kw=veicolo["potenza_kw"],
        regione=veicolo["regione"],
        alimentazione=veicolo["alimentazione"],
        classe_euro=veicolo["classe_euro"],
        anno_immatricolazione=veicolo["anno_immatricolazione"],
        anni_proiezione=st.session_state.anni_proiezione,
        domiciliazione=veicolo["domiciliazione"],
    )
    st.session_state.ultimo_bollo = risultati

    st.divider()
    st.subheader("💰 Bollo Stimato")
    render_risultato_bollo(risultati)


# ============================================================================
# SCHEDA CARBURANTE
# ============================================================================

def render_tab_carburante():
    st.subheader("⛽ Costi Carburante")

    col1, col2, col3 = st.columns(3)
    with col1:
        consumo = st.number_input("Consumo medio (L/100km)", min_value=0.0, max_value=50.0, step=0.1, value=0.0)
    with col2:
        prezzo = st.number_input("Prezzo carburante (€/L)", min_value=0.0, max_value=5.0, step=0.01, value=0.0)
    with col3:
        km_annui = st.number_input("Km annui", min_value=0.0, max_value=200000.0, step=1000.0, value=0.0)

    for valido, msg in (
        validate_consumo(consumo),
        validate_prezzo_carburante(prezzo),
        validate_km_annui(km_annui),
    ):
        render_esito_validazione(valido, msg)

    costi = calcola_costo_carburante(consumo, prezzo, km_annui)

    col1, col2, col3 = st.columns(3)
    with col1:
        render_card_info("Costo annuo", format_currency(costi["costo_annuo"]), icona="💶", colore="orange")
    with col2:
        render_card_info("Litri annui", f"{costi['litri_annui']:.1f} L", icona="⛽", colore="blue")
    with col3:
        render_card_info("Costo al km", format_currency(costi["costo_km"], decimali=3), icona="📏", colore="green")

    proiezione = proiezione_carburante(consumo, prezzo, km_annui, st.session_state.anni_proiezione)
    st.plotly_chart(grafico_carburante(proiezione), use_container_width=True)

    st.divider()
    st.subheader("🅿️ Salva nel Garage")

    if not veicolo_completo():
        st.warning("Completa i dati del veicolo nella scheda Bollo Auto per salvarlo nel garage.")
        return

    veicolo = st.session_state.veicolo
    if st.button("Salva nel Garage", type="primary"):
        successo, messaggio, _ = get_garage().salva_veicolo(
            potenza_kw=veicolo["potenza_kw"],
            regione=veicolo["regione"],
            alimentazione=veicolo["alimentazione"],
            classe_euro=veicolo["classe_euro"],
            anno_immatricolazione=veicolo["anno_immatricolazione"],
            nome=veicolo["nome"],
            consumo=consumo,
            km_annui=km_annui,
            domiciliazione=veicolo["domiciliazione"],
        )
        if successo:
            st.success(f"✅ {messaggio}")
            reset_veicolo()
        else:
            st.error(f"❌ {messaggio}")


# ============================================================================
# SCHEDA CONFRONTO
# ============================================================================

def grafico_cumulato(df, proiezioni) -> go.Figure:
    fig = go.Figure()
    for i, p in enumerate(proiezioni):
        fig.add_trace(go.Scatter(
            x=df["nome"], y=df[p.veicolo.id],
            mode="lines+markers", name=p.veicolo.nome,
            line=dict(color=COLORI_VEICOLI[i % len(COLORI_VEICOLI)], width=3)
        ))
    fig.update_layout(
        height=400,
        yaxis_title="€",
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1)
    )
    return fig


def grafico_riepilogo(riepilogo) -> go.Figure:
    fig = go.Figure(data=[
        go.Bar(name="Bollo", x=riepilogo["nome"], y=riepilogo["totale_bollo"], marker_color="#6366f1"),
        go.Bar(name="Carburante", x=riepilogo["nome"], y=riepilogo["totale_carburante"], marker_color="#f97316"),
    ])
    fig.update_layout(
        height=400,
        barmode="stack",
        yaxis_title="€",
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1)
    )
    return fig


def render_tab_confronto():
    garage = get_garage()
    veicoli = garage.lista_veicoli()

    if not veicoli:
        st.info(
            "**Il Garage è vuoto.** Inserisci i dati di un veicolo nella scheda Bollo Auto "
            "e salvalo dalla scheda Carburante per confrontarlo qui."
        )
        return

    st.subheader("🕒 Orizzonte Temporale")
    anni = st.slider(
        "Per quanti anni vuoi proiettare i costi", min_value=1, max_value=20,
        value=ORIZZONTE_CONFRONTO_DEFAULT, key="orizzonte_confronto"
    )
    st.caption(
        f"Carburante stimato a {format_currency(PARAMETRI_CONFRONTO['prezzo_carburante_medio'])}/L; "
        f"per i veicoli senza dati si assumono {PARAMETRI_CONFRONTO['consumo_default']:.0f} L/100km "
        f"e {PARAMETRI_CONFRONTO['km_annui_default']:,.0f} km/anno."
    )

    proiezioni = confronta_veicoli(veicoli, anni)
    df_cumulato = dati_grafico_cumulato(proiezioni)
    riepilogo = riepilogo_confronto(proiezioni)

    migliore = veicolo_piu_economico(proiezioni)
    if migliore is not None and len(proiezioni) > 1:
        st.success(
            f"🏆 **{migliore.veicolo.nome}** è il più economico in {anni} anni: "
            f"{format_currency(migliore.costo_totale)}"
        )

    col1, col2 = st.columns(2)
    with col1:
        st.markdown("##### 📈 Costi cumulati")
        st.plotly_chart(grafico_cumulato(df_cumulato, proiezioni), use_container_width=True)
    with col2:
        st.markdown("##### 📊 Totale nel periodo")
        st.plotly_chart(grafico_riepilogo(riepilogo), use_container_width=True)

    st.divider()
    st.subheader("🚙 Veicoli nel Garage")

    for p in proiezioni:
        v = p.veicolo
        col1, col2, col3 = st.columns([4, 2, 1])
        with col1:
            st.markdown(f"**{v.nome}**")
            st.caption(
                f"{v.alimentazione.value} · {v.potenza_kw:g} kW · {v.classe_euro.value} · "
                f"{v.regione.value} · {v.anno_immatricolazione}"
                + (" · domiciliazione" if v.domiciliazione else "")
            )
        with col2:
            st.metric(label=f"Totale {anni} anni", value=format_currency(p.costo_totale))
        with col3:
            if st.button("🗑️", key=f"elimina_{v.id}", help="Elimina dal garage"):
                successo, messaggio = garage.elimina_veicolo(v.id)
                if successo:
                    st.rerun()
                else:
                    st.error(f"❌ {messaggio}")


# ============================================================================
# MAIN
# ============================================================================

def main():
    init_session_state()

    st.markdown('<p class="main-header">🚗 EcoBollo</p>', unsafe_allow_html=True)
    st.markdown(
        '<p class="sub-header">Stima del bollo auto e dei costi di carburante, confronto tra veicoli</p>',
        unsafe_allow_html=True
    )

    tab_bollo, tab_carburante, tab_confronto = st.tabs([
        "🚗 Bollo Auto",
        "⛽ Carburante",
        "📊 Confronto Garage",
    ])

    with tab_bollo:
        render_tab_bollo()

    with tab_carburante:
        render_tab_carburante()

    with tab_confronto:
        render_tab_confronto()

    st.divider()
    st.markdown(f"""
    <div style="text-align: center; color: #666; font-size: 0.8rem;">
        EcoBollo v{VERSIONE} | Stime indicative basate su tariffe medie regionali
    </div>
    """, unsafe_allow_html=True)


if __name__ == "__main__":
    main()
