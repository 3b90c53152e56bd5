from trade_bot.main import main

main()
