"""Entrypoint running the search CLI."""

from yt_search.cli import main


if __name__ == "__main__":
    main()
