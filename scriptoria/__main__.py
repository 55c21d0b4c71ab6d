import sys

from scriptoria.cli.repl import main

sys.exit(main())
