"""Pure validation rules for documents and contact fields."""
