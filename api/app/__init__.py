"""Calculation API: GraphQL service over the calc library."""
