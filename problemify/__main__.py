from problemify.cli import main

raise SystemExit(main())
