"""Client for the anime catalogue API and parsers for what it returns."""