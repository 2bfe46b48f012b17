from .game_client import main

if __name__ == "__main__":
    main()
