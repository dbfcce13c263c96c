"""Console Mastermind: guess the 4-digit code (digits 1-6) in 10 turns."""
