import sys

from court_sentiment.cli.commands import main

sys.exit(main())
