from hotel_booking.main import main

raise SystemExit(main())
