"""Personal job application tracker with timeline and cohort analytics."""
