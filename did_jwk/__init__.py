"""did:jwk DID method: identifier codec, document expansion and resolution."""
