from mostro_web.server import main

if __name__ == "__main__":
    main()
