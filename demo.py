"""Demo entry point for the Dice Clicker game."""
from dice_clicker.ui.screens.app import main

if __name__ == "__main__":
    main()
