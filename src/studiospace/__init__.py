"""StudioSpace: photography studio space discovery across listing sites."""
