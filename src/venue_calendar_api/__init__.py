"""REST adapter exposing the venue calendar over HTTP."""
