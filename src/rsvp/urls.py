SUBMIT_RSVP_URL = "/submit-rsvp"
