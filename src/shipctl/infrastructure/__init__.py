"""Infrastructure layer — file artifacts written by the init pipeline."""
