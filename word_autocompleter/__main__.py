import sys

from word_autocompleter.cli.cli import main

sys.exit(main())
