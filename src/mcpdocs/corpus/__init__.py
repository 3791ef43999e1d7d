"""Reading and classifying the documentation corpus."""
