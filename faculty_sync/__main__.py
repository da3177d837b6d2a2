from faculty_sync.cli import main

raise SystemExit(main())
