"""Enable running whatdidido as a module: python -m whatdidido."""

from whatdidido.cli import main

if __name__ == "__main__":
    main()
