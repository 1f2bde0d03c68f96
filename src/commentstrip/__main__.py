from commentstrip.cli import main

main()
