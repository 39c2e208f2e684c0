import sys

from desktop_setup.main import main

sys.exit(main())
