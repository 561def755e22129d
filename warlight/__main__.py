from warlight.bot.easy import main

main()
