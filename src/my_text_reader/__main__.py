from my_text_reader.cli.main import main

if __name__ == "__main__":
    main()
