"""Domain services: safety, triage, insights and reframes."""
