"""Entry point for the 'python -m curator' command."""

from curator.cli import main

if __name__ == "__main__":
    main()
