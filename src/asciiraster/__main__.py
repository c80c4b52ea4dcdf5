from asciiraster.cli import main

raise SystemExit(main())
