"""Division, GCD and Bezout cofactors for univariate polynomials."""
