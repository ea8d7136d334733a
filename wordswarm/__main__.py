from wordswarm.app import main

main()
