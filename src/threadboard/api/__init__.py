"""HTTP and GraphQL API for Threadboard."""
