"""Translation gateways.

Use explicit imports: ``from polyfaq.services.translation.google import GoogleTranslationGateway``.
"""
