from wilayah.build import main

main()
