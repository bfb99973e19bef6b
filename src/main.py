"""Main entry point for the todo.txt -> Tasks.org converter."""
from cli import main

if __name__ == "__main__":
    main()
