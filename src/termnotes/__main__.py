import sys
from termnotes.cli import main

sys.exit(main())
