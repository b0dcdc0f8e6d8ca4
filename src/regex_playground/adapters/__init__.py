"""Host adapters wiring the playground session into UI toolkits."""
