"""Project materialization engine: codegen, fetch-and-merge and workspace composition."""
