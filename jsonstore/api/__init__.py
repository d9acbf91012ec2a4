"""HTTP surface exposing a store to local tools."""
