from autocomplete import run_autocomplete
import sys

if __name__ == '__main__':
    sys.exit(run_autocomplete(sys.argv[1:]))
