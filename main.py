#!/usr/bin/env python3
"""
EcoBollo - Interfaccia CLI Principale

Stima del bollo auto e dei costi di carburante da terminale:
- Calcolo bollo anno per anno
- Gestione garage (veicoli salvati)
- Confronto costi tra i veicoli del garage

Autore: EcoBollo
Versione: 1.0.0
"""

import sys
import os
from datetime import date

# Aggiungi la directory corrente al path per gli import
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from modules.tariffe_bollo import Alimentazione, ClasseEuro, get_lista_regioni
from modules.calculator_bollo import calcola_sequenza_bollo, totale_sequenza
from modules.calculator_carburante import calcola_costo_carburante
from modules.garage import get_garage
from modules.confronto_garage import confronta_veicoli, veicolo_piu_economico
from components.validators import (
    validate_anni_proiezione, parse_regione, parse_alimentazione, parse_classe_euro
)


# ============================================================================
# COSTANTI E CONFIGURAZIONE
# ============================================================================

VERSIONE = "1.0.0"

REGIONI = {str(i): nome for i, nome in enumerate(get_lista_regioni(), start=1)}
ALIMENTAZIONI = {str(i): a.value for i, a in enumerate(Alimentazione, start=1)}
CLASSI_EURO = {str(i): c.value for i, c in enumerate(ClasseEuro)}


# ============================================================================
# FUNZIONI DI UTILITÀ CLI
# ============================================================================

def clear_screen():
    """Pulisce lo schermo del terminale."""
    os.system('cls' if os.name == 'nt' else 'clear')


def print_header():
    """Stampa l'intestazione del programma."""
    print("\n" + "=" * 70)
    print("  ECOBOLLO v" + VERSIONE)
    print("  Stima bollo auto e costi di carburante")
    print("=" * 70)


def print_menu_principale():
    """Stampa il menu principale."""
    print("\n[MENU PRINCIPALE]")
    print("-" * 40)
    print("  1. Calcolo bollo")
    print("  2. Calcolo bollo e salvataggio nel garage")
    print("  3. Elenco veicoli nel garage")
    print("  4. Confronto costi garage")
    print("  5. Elimina veicolo dal garage")
    print("  0. Esci")
    print("-" * 40)


def input_float(prompt: str, min_val: float = None, max_val: float = None) -> float:
    """Richiede un input numerico con validazione."""
    while True:
        try:
            valore = float(input(prompt).replace(",", "."))
            if min_val is not None and valore < min_val:
                print(f"  [!] Il valore deve essere >= {min_val}")
                continue
            if max_val is not None and valore > max_val:
                print(f"  [!] Il valore deve essere <= {max_val}")
                continue
            return valore
        except ValueError:
            print("  [!] Inserire un numero valido")


def input_int(prompt: str, min_val: int = None, max_val: int = None) -> int:
    """Richiede un input intero con validazione."""
    while True:
        try:
            valore = int(input(prompt))
            if min_val is not None and valore < min_val:
                print(f"  [!] Il valore deve essere >= {min_val}")
                continue
            if max_val is not None and valore > max_val:
                print(f"  [!] Il valore deve essere <= {max_val}")
                continue
            return valore
        except ValueError:
            print("  [!] Inserire un numero intero valido")


def input_scelta(prompt: str, opzioni_valide: list) -> str:
    """Richiede una scelta tra opzioni valide."""
    while True:
        scelta = input(prompt).strip().upper()
        if scelta in opzioni_valide:
            return scelta
        print(f"  [!] Scelta non valida. Opzioni: {', '.join(opzioni_valide)}")


def input_anni_proiezione(prompt: str) -> int:
    """Richiede l'orizzonte della proiezione finché non è valido."""
    while True:
        anni = input_int(prompt)
        valido, messaggio = validate_anni_proiezione(anni)
        if valido:
            return anni
        print(f"  [!] {messaggio}")


def pausa():
    """Pausa prima di continuare."""
    input("\nPremi INVIO per continuare...")


# ============================================================================
# RACCOLTA DATI VEICOLO
# ============================================================================

def raccogli_dati_veicolo() -> dict:
    """Raccoglie i dati del veicolo per il calcolo del bollo."""
    anno_corrente = date.today().year

    print("\n[DATI VEICOLO]")
    print("-" * 40)

    potenza = input_float("  Potenza [kW]: ", min_val=1, max_val=1000)

    print("\nRegione di residenza:")
    for key, nome in REGIONI.items():
        print(f"  {key:>2}. {nome}")
    regione = parse_regione(REGIONI[input_scelta("\nScelta: ", list(REGIONI.keys()))])

    print("\nAlimentazione:")
    for key, alimentazione in ALIMENTAZIONI.items():
        print(f"  {key}. {alimentazione}")
    alimentazione = parse_alimentazione(ALIMENTAZIONI[input_scelta("\nScelta [1-6]: ", list(ALIMENTAZIONI.keys()))])

    print("\nClasse ambientale:")
    for key, classe in CLASSI_EURO.items():
        print(f"  {key}. {classe}")
    classe_euro = parse_classe_euro(CLASSI_EURO[input_scelta("\nScelta [0-6]: ", list(CLASSI_EURO.keys()))])

    anno_imm = input_int(
        f"\nAnno immatricolazione [1950-{anno_corrente + 1}]: ",
        min_val=1950, max_val=anno_corrente + 1
    )

    domiciliazione = input_scelta("Domiciliazione bancaria? [S/N]: ", ["S", "N"]) == "S"

    return {
        "potenza_kw": potenza,
        "regione": regione,
        "alimentazione": alimentazione,
        "classe_euro": classe_euro,
        "anno_immatricolazione": anno_imm,
        "domiciliazione": domiciliazione,
    }


def stampa_sequenza(risultati):
    print("\n" + "-" * 70)
    for r in risultati:
        stato = "ESENTE" if r.esente else f"{r.importo:>9.2f} EUR"
        print(f"  {r.etichetta:<20} {stato:>14}   {r.messaggio}")
    totali = totale_sequenza(risultati)
    print("-" * 70)
    print(f"  {'TOTALE':<20} {totali['totale']:>10.2f} EUR   (media {totali['media_annua']:.2f} EUR/anno)")


# ============================================================================
# AZIONI MENU
# ============================================================================

def calcolo_bollo(salva: bool = False):
    """Calcola il bollo ed eventualmente salva il veicolo nel garage."""
    dati = raccogli_dati_veicolo()
    anni = input_anni_proiezione("\nAnni da calcolare [1-20]: ")

    risultati = calcola_sequenza_bollo(anni_proiezione=anni, **dati)
    stampa_sequenza(risultati)

    if salva:
        print("\n[DATI CARBURANTE]")
        consumo = input_float("  Consumo medio [L/100km]: ", min_val=0, max_val=50)
        km_annui = input_float("  Km annui: ", min_val=0, max_val=200000)
        prezzo = input_float("  Prezzo carburante [EUR/L]: ", min_val=0, max_val=5)
        costi = calcola_costo_carburante(consumo, prezzo, km_annui)
        print(f"\n  Costo carburante annuo: {costi['costo_annuo']:.2f} EUR "
              f"({costi['litri_annui']:.1f} L, {costi['costo_km']:.3f} EUR/km)")

        nome = input("\nNome del veicolo (INVIO per default): ")
        successo, messaggio, _ = get_garage().salva_veicolo(
            nome=nome, consumo=consumo, km_annui=km_annui, **dati
        )
        print(f"\n  [{'OK' if successo else 'ERRORE'}] {messaggio}")

    pausa()


def elenco_garage():
    veicoli = get_garage().lista_veicoli()
    print("\n[GARAGE]")
    if not veicoli:
        print("  Il garage è vuoto.")
    for i, v in enumerate(veicoli, start=1):
        print(f"  {i}. {v.nome} - {v.alimentazione.value}, {v.potenza_kw:g} kW, "
              f"{v.classe_euro.value}, {v.regione.value}, {v.anno_immatricolazione}")
    pausa()


def confronto_garage():
    veicoli = get_garage().lista_veicoli()
    if not veicoli:
        print("\n  Il garage è vuoto: salva almeno un veicolo.")
        pausa()
        return

    anni = input_anni_proiezione("\nOrizzonte temporale [1-20 anni]: ")
    proiezioni = confronta_veicoli(veicoli, anni)

    print("\n" + "=" * 70)
    print(f"  CONFRONTO COSTI SU {anni} ANNI")
    print("=" * 70)
    print(f"  {'Veicolo':<30} {'Bollo':>12} {'Carburante':>12} {'Totale':>12}")
    for p in proiezioni:
        print(f"  {p.veicolo.nome[:30]:<30} {p.totale_bollo:>12.2f} "
              f"{p.totale_carburante:>12.2f} {p.costo_totale:>12.2f}")

    migliore = veicolo_piu_economico(proiezioni)
    if len(proiezioni) > 1:
        print(f"\n  Più economico: {migliore.veicolo.nome} ({migliore.costo_totale:.2f} EUR)")
    pausa()


def elimina_dal_garage():
    garage = get_garage()
    veicoli = garage.lista_veicoli()
    if not veicoli:
        print("\n  Il garage è vuoto.")
        pausa()
        return

    for i, v in enumerate(veicoli, start=1):
        print(f"  {i}. {v.nome}")
    indice = input_int("\nVeicolo da eliminare (0 = annulla): ", min_val=0, max_val=len(veicoli))
    if indice > 0:
        successo, messaggio = garage.elimina_veicolo(veicoli[indice - 1].id)
        print(f"\n  [{'OK' if successo else 'ERRORE'}] {messaggio}")
    pausa()


# ============================================================================
# MAIN
# ============================================================================

def main():
    """Funzione principale del programma."""
    while True:
        clear_screen()
        print_header()
        print_menu_principale()

        scelta = input("\nScelta: ").strip()

        if scelta == "1":
            calcolo_bollo()
        elif scelta == "2":
            calcolo_bollo(salva=True)
        elif scelta == "3":
            elenco_garage()
        elif scelta == "4":
            confronto_garage()
        elif scelta == "5":
            elimina_dal_garage()
        elif scelta == "0":
            print("\nArrivederci!")
            break
        else:
            print("\n[!] Scelta non valida")
            pausa()


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\n\nProgramma interrotto dall'utente.")
        sys.exit(0)
