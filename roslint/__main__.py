from roslint.main import main

main()
