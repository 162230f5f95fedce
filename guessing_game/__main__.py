import sys

from guessing_game.cli import main

sys.exit(main())
