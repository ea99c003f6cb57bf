from openapi_bundler.cli import main

if __name__ == "__main__":
    main()
