import sys

from slice_arcade.play import main

if __name__ == "__main__":
    sys.exit(main())
