import logging
import sys

import pylox

if __name__ == '__main__':
    args = [arg for arg in sys.argv[1:] if arg != '--verbose']
    verbose = '--verbose' in sys.argv

    if len(args) > 1:
        print(f'Usage: {sys.argv[0]} [script] [--verbose]')
        sys.exit(pylox.EX_USAGE)

    logging.basicConfig(
        format='%(message)s',
        level=logging.DEBUG if verbose else logging.WARNING,
    )

    if args:
        sys.exit(pylox.run_file(args[0], verbose=verbose))
    sys.exit(pylox.run_prompt(verbose=verbose))
