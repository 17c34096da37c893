# Deck Brief: pitch deck text in, summary and VC brief out.
