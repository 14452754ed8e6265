import sys

from .cli.analyze_protein import main

sys.exit(main())
