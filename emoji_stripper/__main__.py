import sys

from emoji_stripper.main import main

sys.exit(main())
