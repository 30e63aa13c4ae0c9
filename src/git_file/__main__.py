from git_file.cli.cli import main

if __name__ == "__main__":
    main()
