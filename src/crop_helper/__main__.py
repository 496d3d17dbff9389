from .crop_helper import main

if __name__ == "__main__":
    main()
