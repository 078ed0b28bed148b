import sys

from sailing_coach.app import main

if __name__ == "__main__":
    sys.exit(main())
