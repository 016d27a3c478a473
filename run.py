import sys

from utft.cli import main

if __name__ == '__main__':
    sys.exit(main())
