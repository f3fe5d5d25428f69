"""Main entry point for StackIt AI."""

from stackit.cli import main

if __name__ == "__main__":
    main()
