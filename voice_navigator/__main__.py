import sys

from voice_navigator.adapters.cli import main

sys.exit(main())
