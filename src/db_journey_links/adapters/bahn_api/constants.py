"""Constants for the bahn.de booking API.

The endpoints are the ones the bahn.de web frontend calls; they are
undocumented and require no authentication.
"""

CONNECTION_PATH = "/web/api/angebote/verbindung"  # GET /verbindung/{vbid}
RECON_PATH = "/web/api/angebote/recon"  # POST with ctxRecon
BOOKING_START_PATH = "/buchung/start"

DEFAULT_HEADERS = {
    "Accept": "application/json",
    "Accept-Language": "de",
}

# Travellers sent with the recon request; the station ids do not depend on them
RECON_TRAVELLERS = [
    {
        "typ": "ERWACHSENER",
        "ermaessigungen": [{"art": "KEINE_ERMAESSIGUNG", "klasse": "KLASSENLOS"}],
        "alter": [],
        "anzahl": 1,
    }
]
RECON_CLASS = "KLASSE_2"
