"""HTTP front end for the marshians_fn solvers."""
