"""Allow ``python -m minesweeper``."""
from .cli import main


if __name__ == "__main__":
    main()
