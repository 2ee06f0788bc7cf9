import sys

from porter_stemmer.cli import main

sys.exit(main())
