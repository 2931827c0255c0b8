from .aops import main

main()
