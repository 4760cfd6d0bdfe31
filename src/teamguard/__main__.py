from teamguard.cli import main

main()
