"""HTTP surface over the dictation comparison core."""
