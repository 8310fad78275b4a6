from shifttracker.app import main

main()
