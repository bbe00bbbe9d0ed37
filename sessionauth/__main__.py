from sessionauth.app import main

main()
