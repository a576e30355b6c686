import sys

from nixshim.cli._dispatcher import main

if __name__ == "__main__":
    sys.exit(main())
