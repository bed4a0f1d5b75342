"""HTTP front end for the Chirpy core."""
