from quick_sort_studio.cli import main

raise SystemExit(main())
