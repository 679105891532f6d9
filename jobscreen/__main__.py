from jobscreen.cli import main

raise SystemExit(main())
