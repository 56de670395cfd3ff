"""
Test per modulo calculator_bollo.py

Verifica la sequenza anno per anno: tariffe a scaglioni, esenzioni,
riduzioni GPL/Metano e sconto domiciliazione. L'anno corrente è sempre
fissato esplicitamente.
"""

import sys
from pathlib import Path

# Aggiungi parent directory al path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from modules.tariffe_bollo import (
    Alimentazione, ClasseEuro, Regione, TabellaTariffe, TariffaKw, TABELLA_2024
)
from modules.calculator_bollo import (
    calcola_sequenza_bollo,
    calcola_importo_standard,
    totale_sequenza,
    RisultatoAnno
)

ANNO = 2024


def bollo(
    potenza=120,
    regione=Regione.LOMBARDIA,
    alimentazione=Alimentazione.BENZINA,
    classe=ClasseEuro.EURO_6,
    immatricolazione=2020,
    anni=1,
    domiciliazione=False,
    **kwargs
):
    return calcola_sequenza_bollo(
        potenza, regione, alimentazione, classe, immatricolazione, anni,
        domiciliazione=domiciliazione, anno_corrente=ANNO, **kwargs
    )


class TestEsempiNoti:
    """Casi di riferimento con importi calcolati a mano."""

    def test_benzina_120kw_lombardia(self):
        """100 × 2,58 + 20 × 3,87 = 335,40 €."""
        risultati = bollo()
        assert len(risultati) == 1
        assert risultati[0].importo == pytest.approx(335.40)
        assert risultati[0].esente is False
        assert risultati[0].messaggio == "Tariffa standard"

    def test_benzina_120kw_lombardia_domiciliazione(self):
        """Sconto Lombardia 15%: 335,40 × 0,85 = 285,09 €."""
        risultati = bollo(domiciliazione=True)
        assert risultati[0].importo == pytest.approx(285.09)
        assert risultati[0].messaggio == "Tariffa standard + Sconto domiciliazione (-15%)"
        assert risultati[0].sconto_domiciliazione is True

    def test_elettrica_nuova_esente(self):
        """Elettrica immatricolata quest'anno: esente i primi due anni."""
        risultati = bollo(alimentazione=Alimentazione.ELETTRICA, immatricolazione=2024, anni=2)
        assert [r.esente for r in risultati] == [True, True]
        assert [r.importo for r in risultati] == [0.0, 0.0]
        assert risultati[0].messaggio == "Esenzione Elettrica (1/5 anni)"
        assert risultati[1].messaggio == "Esenzione Elettrica (2/5 anni)"

    def test_ibrida_veneto_fine_esenzione(self):
        """Veneto: 3 anni di esenzione; al terzo anno di età si paga."""
        risultati = bollo(
            potenza=80, regione=Regione.VENETO, alimentazione=Alimentazione.IBRIDA,
            immatricolazione=2021
        )
        assert risultati[0].esente is False
        # 80 × 2,58 × 1,10
        assert risultati[0].importo == pytest.approx(227.04)
        assert risultati[0].messaggio == "Tariffa standard"


class TestSequenza:
    """Proprietà strutturali della sequenza."""

    def test_lunghezza_e_anni_consecutivi(self):
        risultati = bollo(anni=10)
        assert len(risultati) == 10
        assert [r.anno for r in risultati] == list(range(ANNO, ANNO + 10))

    def test_etichette(self):
        risultati = bollo(anni=3)
        assert [r.etichetta for r in risultati] == [
            "Anno 1 (2024)", "Anno 2 (2025)", "Anno 3 (2026)"
        ]

    def test_zero_anni(self):
        assert bollo(anni=0) == []

    def test_anno_corrente_default(self):
        """Senza anno_corrente esplicito si parte dall'anno in corso."""
        from datetime import date
        risultati = calcola_sequenza_bollo(
            100, Regione.LAZIO, Alimentazione.DIESEL, ClasseEuro.EURO_5, 2015, 1
        )
        assert risultati[0].anno == date.today().year

    def test_esente_implica_importo_zero(self):
        """Per ogni combinazione, un anno esente ha importo 0."""
        for alimentazione in Alimentazione:
            for regione in Regione:
                for r in bollo(
                    potenza=150, regione=regione, alimentazione=alimentazione,
                    immatricolazione=2022, anni=8, domiciliazione=True
                ):
                    if r.esente:
                        assert r.importo == 0.0

    def test_importi_arrotondati(self):
        for r in bollo(potenza=97.3, regione=Regione.CAMPANIA, classe=ClasseEuro.EURO_2, anni=3):
            assert r.importo == round(r.importo, 2)

    def test_to_dict(self):
        dati = bollo()[0].to_dict()
        assert dati["anno"] == 2024
        assert dati["esente"] is False
        assert set(dati) == {"anno", "etichetta", "importo", "esente", "messaggio", "sconto_domiciliazione"}


class TestImportoStandard:
    """Tariffa a scaglioni sulla potenza."""

    TARIFFA = TariffaKw(fino_100=2.58, oltre_100=3.87)

    def test_sotto_soglia(self):
        assert calcola_importo_standard(50, self.TARIFFA, 1.0) == pytest.approx(129.0)

    def test_oltre_soglia(self):
        assert calcola_importo_standard(150, self.TARIFFA, 1.0) == pytest.approx(258.0 + 193.5)

    def test_coefficiente_regionale(self):
        assert calcola_importo_standard(100, self.TARIFFA, 1.15) == pytest.approx(296.7)

    def test_continuita_a_100kw(self):
        """Nessun salto tra i due scaglioni."""
        a_100 = calcola_importo_standard(100, self.TARIFFA, 1.0)
        appena_sopra = calcola_importo_standard(100.0001, self.TARIFFA, 1.0)
        assert appena_sopra - a_100 == pytest.approx(0.0001 * 3.87)

    def test_monotonia(self):
        """L'importo non diminuisce mai all'aumentare della potenza."""
        precedente = -1.0
        for potenza in range(0, 301, 5):
            importo = calcola_importo_standard(potenza, self.TARIFFA, 1.1)
            assert importo >= precedente
            precedente = importo

    def test_potenza_zero(self):
        assert calcola_importo_standard(0, self.TARIFFA, 1.1) == 0.0


class TestElettriche:

    def test_tariffa_ridotta_post_esenzione(self):
        """Dopo 5 anni si paga il 25%: 100 × 2,58 × 1,10 × 0,25."""
        risultati = bollo(
            potenza=100, regione=Regione.LAZIO, alimentazione=Alimentazione.ELETTRICA,
            immatricolazione=2018
        )
        assert risultati[0].esente is False
        assert risultati[0].importo == pytest.approx(70.95)
        assert risultati[0].messaggio == "Tariffa ridotta (25%) post-esenzione"

    def test_transizione_esenzione(self):
        """Immatricolata 2021: esente 2024-2025, poi tariffa ridotta."""
        risultati = bollo(alimentazione=Alimentazione.ELETTRICA, immatricolazione=2021, anni=4)
        assert [r.esente for r in risultati] == [True, True, False, False]
        assert risultati[1].messaggio == "Esenzione Elettrica (5/5 anni)"
        assert risultati[2].importo == pytest.approx(335.40 * 0.25, abs=0.01)

    def test_immatricolazione_futura(self):
        """Età negativa: ricade comunque nella finestra di esenzione."""
        risultati = bollo(alimentazione=Alimentazione.ELETTRICA, immatricolazione=2026, anni=1)
        assert risultati[0].esente is True
        assert risultati[0].messaggio == "Esenzione Elettrica (-1/5 anni)"

    def test_domiciliazione_su_tariffa_ridotta(self):
        risultati = bollo(
            alimentazione=Alimentazione.ELETTRICA, immatricolazione=2015, domiciliazione=True
        )
        assert risultati[0].importo == pytest.approx(335.40 * 0.25 * 0.85, abs=0.01)
        assert risultati[0].messaggio.endswith("+ Sconto domiciliazione (-15%)")

    def test_domiciliazione_ignorata_se_esente(self):
        risultati = bollo(
            alimentazione=Alimentazione.ELETTRICA, immatricolazione=2024, domiciliazione=True
        )
        assert risultati[0].importo == 0.0
        assert "domiciliazione" not in risultati[0].messaggio
        assert risultati[0].sconto_domiciliazione is False


class TestIbride:

    def test_lombardia_cinque_anni(self):
        risultati = bollo(
            regione=Regione.LOMBARDIA, alimentazione=Alimentazione.IBRIDA,
            immatricolazione=2022, anni=4
        )
        assert [r.esente for r in risultati] == [True, True, True, False]
        assert risultati[0].messaggio == "Esenzione Ibrida (3/5 anni)"

    def test_regione_senza_esenzione(self):
        """Lazio prevede 0 anni: mai esente."""
        risultati = bollo(
            regione=Regione.LAZIO, alimentazione=Alimentazione.IBRIDA, immatricolazione=2024
        )
        assert risultati[0].esente is False
        assert risultati[0].messaggio == "Tariffa standard"

    def test_regione_non_in_tabella_usa_default(self):
        """Sicilia non ha regola specifica: default 0 anni."""
        risultati = bollo(
            regione=Regione.SICILIA, alimentazione=Alimentazione.IBRIDA, immatricolazione=2024
        )
        assert risultati[0].esente is False
        assert risultati[0].importo == pytest.approx(335.40)

    def test_ibrida_uguale_a_benzina_dopo_esenzione(self):
        ibrida = bollo(regione=Regione.VENETO, alimentazione=Alimentazione.IBRIDA, immatricolazione=2010)
        benzina = bollo(regione=Regione.VENETO, alimentazione=Alimentazione.BENZINA, immatricolazione=2010)
        assert ibrida[0].importo == benzina[0].importo


class TestRiduzioneEcologica:

    @pytest.mark.parametrize("alimentazione", [Alimentazione.GPL, Alimentazione.METANO])
    def test_75_percento_della_benzina(self, alimentazione):
        kwargs = dict(potenza=90, regione=Regione.CAMPANIA, classe=ClasseEuro.EURO_4, immatricolazione=2012)
        ecologica = bollo(alimentazione=alimentazione, **kwargs)[0]
        benzina = calcola_importo_standard(90, TABELLA_2024.tariffa_base(ClasseEuro.EURO_4), 1.15)
        assert ecologica.importo == pytest.approx(round(benzina * 0.75, 2))
        assert ecologica.messaggio == "Tariffa ridotta ecologica"

    def test_diesel_non_ridotto(self):
        diesel = bollo(alimentazione=Alimentazione.DIESEL)[0]
        assert diesel.importo == pytest.approx(335.40)
        assert diesel.messaggio == "Tariffa standard"

    def test_riduzione_prima_dello_sconto(self):
        """La nota ecologica sostituisce quella standard, lo sconto si aggiunge."""
        risultato = bollo(alimentazione=Alimentazione.METANO, domiciliazione=True)[0]
        assert risultato.importo == pytest.approx(335.40 * 0.75 * 0.85, abs=0.01)
        assert risultato.messaggio == "Tariffa ridotta ecologica + Sconto domiciliazione (-15%)"


class TestDomiciliazione:

    @pytest.mark.parametrize("regione", [
        Regione.LOMBARDIA, Regione.EMILIA_ROMAGNA, Regione.VENETO, Regione.ABRUZZO,
        Regione.MOLISE, Regione.SARDEGNA, Regione.TRENTINO_ALTO_ADIGE
    ])
    def test_riduce_importo(self, regione):
        senza = bollo(regione=regione)[0]
        con = bollo(regione=regione, domiciliazione=True)[0]
        assert con.importo < senza.importo

    @pytest.mark.parametrize("regione", [Regione.LAZIO, Regione.CAMPANIA, Regione.SICILIA])
    def test_regione_senza_sconto(self, regione):
        senza = bollo(regione=regione)[0]
        con = bollo(regione=regione, domiciliazione=True)[0]
        assert con.importo == senza.importo
        assert con.messaggio == "Tariffa standard"
        assert con.sconto_domiciliazione is False

    def test_nota_una_sola_volta_per_anno(self):
        for r in bollo(domiciliazione=True, anni=5):
            assert r.messaggio.count("domiciliazione") == 1


class TestTabellaPersonalizzata:
    """Il calcolatore usa solo la tabella ricevuta."""

    def test_esenzione_elettriche_diversa(self):
        tabella = TabellaTariffe(
            anno_riferimento=2030,
            tariffe_base={ClasseEuro.EURO_6: TariffaKw(1.0, 2.0)},
            coefficienti_regionali={},
            esenzione_elettriche=1,
        )
        risultati = bollo(
            potenza=110, alimentazione=Alimentazione.ELETTRICA,
            immatricolazione=2023, anni=1, tabella=tabella
        )
        # età 1 ≥ 1: tariffa ridotta su (100 × 1 + 10 × 2) × 1,0
        assert risultati[0].esente is False
        assert risultati[0].importo == pytest.approx(30.0)

    def test_voci_mancanti_non_generano_errori(self):
        tabella = TabellaTariffe(
            anno_riferimento=2030,
            tariffe_base={ClasseEuro.EURO_6: TariffaKw(2.0, 3.0)},
            coefficienti_regionali={},
        )
        risultati = bollo(
            potenza=50, classe=ClasseEuro.EURO_0, regione=Regione.CAMPANIA,
            domiciliazione=True, anni=3, tabella=tabella
        )
        assert len(risultati) == 3
        assert all(r.importo == pytest.approx(100.0) for r in risultati)


class TestTotali:

    def test_totale_e_media(self):
        risultati = [
            RisultatoAnno(2024, "Anno 1 (2024)", 0.0, True, "Esenzione"),
            RisultatoAnno(2025, "Anno 2 (2025)", 100.5, False, "Tariffa standard"),
        ]
        assert totale_sequenza(risultati) == {"totale": 100.5, "media_annua": 50.25}

    def test_sequenza_vuota(self):
        assert totale_sequenza([]) == {"totale": 0.0, "media_annua": 0.0}
