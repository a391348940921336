import sys
from anybase.cli import main
sys.exit(main())
