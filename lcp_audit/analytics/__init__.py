"""Pure analysis steps of the prioritize-LCP-image audit."""
