from bestchain.cli import (
    main,
)

main()
