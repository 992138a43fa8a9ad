from tick_vline.app import main

main()
