from mkfilep.cli import main

raise SystemExit(main())
