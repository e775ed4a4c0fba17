from npm_publish_tool.cli.app import main

if __name__ == "__main__":
    main()
