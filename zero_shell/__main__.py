from zero_shell.cli import main

raise SystemExit(main())
