"""
Test per l'interfaccia CLI (main.py)

Le risposte dell'utente sono simulate sostituendo input().
"""

import sys
from pathlib import Path

# Aggiungi parent directory al path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from modules.tariffe_bollo import Alimentazione, ClasseEuro, Regione
import main


@pytest.fixture
def risposte(monkeypatch):
    def imposta(*valori):
        coda = iter(valori)
        monkeypatch.setattr("builtins.input", lambda prompt="": next(coda))
    return imposta


class TestMenuSelezione:

    def test_opzioni_come_valori(self):
        assert main.REGIONI["9"] == "Lombardia"
        assert main.ALIMENTAZIONI["2"] == "Diesel"
        assert main.CLASSI_EURO["0"] == "Euro 0"

    def test_raccogli_dati_veicolo(self, risposte):
        # potenza, regione, alimentazione, classe, anno, domiciliazione
        risposte("85", "9", "2", "5", "2015", "s")
        dati = main.raccogli_dati_veicolo()
        assert dati["potenza_kw"] == 85.0
        assert dati["regione"] is Regione.LOMBARDIA
        assert dati["alimentazione"] is Alimentazione.DIESEL
        assert dati["classe_euro"] is ClasseEuro.EURO_5
        assert dati["anno_immatricolazione"] == 2015
        assert dati["domiciliazione"] is True

    def test_scelta_non_valida_ripetuta(self, risposte, capsys):
        risposte("85", "99", "20", "6", "7", "6", "2020", "N")
        dati = main.raccogli_dati_veicolo()
        assert dati["regione"] is Regione.VENETO
        assert dati["alimentazione"] is Alimentazione.ELETTRICA
        assert dati["classe_euro"] is ClasseEuro.EURO_6
        assert "Scelta non valida" in capsys.readouterr().out


class TestAnniProiezione:

    def test_valore_valido(self, risposte):
        risposte("10")
        assert main.input_anni_proiezione("Anni: ") == 10

    def test_fuori_intervallo_richiesto_di_nuovo(self, risposte, capsys):
        risposte("0", "21", "abc", "5")
        assert main.input_anni_proiezione("Anni: ") == 5
        uscita = capsys.readouterr().out
        assert "almeno 1 anno" in uscita
        assert "non può superare 20 anni" in uscita
