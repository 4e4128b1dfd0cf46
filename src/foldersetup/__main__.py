import sys

from foldersetup.main import main

sys.exit(main())
