# Password Strength Analyzer
# Purpose: interactive menu for analyzing password strength and generating random passwords.
# Common-password detection is enabled when the dictionary file can be loaded.

import logging

from core import DICTIONARY_FILE, configure_logging
from password_checker import PasswordAnalyzer
from cli import analyze_password_flow, generate_password_flow


logger = logging.getLogger(__name__)


# print the main menu
def show_menu():
    print("=========================================")
    print("   Password Strength Analyzer")
    print("=========================================")
    print("1) Analyze a password")
    print("2) Generate a strong password")
    print("3) Quit")


# main app menu and selection options
def main_menu(analyzer):
    while True:
        show_menu()
        try:
            choice = int(input("Choose an option: ").strip())
        except ValueError:
            print("Invalid input. Please enter a number.\n")
            continue

        if choice == 1:
            analyze_password_flow(analyzer)     # score, rate and advise
        elif choice == 2:
            generate_password_flow(analyzer)    # random password from length + symbol flag
        elif choice == 3:
            break                               # exit program
        else:
            print("Please choose 1, 2, or 3.\n")

    print("Goodbye!")


# script entry: load dictionary (non-fatal) then run the menu
def main(dictionary_file=DICTIONARY_FILE):
    configure_logging()
    analyzer = PasswordAnalyzer.from_file(dictionary_file)

    if not analyzer.is_dictionary_loaded():
        logger.info("Running without a common password dictionary")
        print("[Info] Running without a common password dictionary.")
        print(f"       (Place a dictionary file at '{dictionary_file}'")
        print("        to enable common-password detection.)\n")

    try:
        main_menu(analyzer)
    except (KeyboardInterrupt, EOFError):
        print("\nGoodbye!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
