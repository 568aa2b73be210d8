from dataclasses import dataclass


@dataclass
class EmailTemplates:
    GUEST_CONFIRMATION_SUBJECT = "Your Birthday Lunch RSVP Confirmation"
    GUEST_CONFIRMATION_HTML = """
    <!DOCTYPE html>
    <html>
    <head>
        <meta charset="utf-8">
        <meta name="viewport" content="width=device-width, initial-scale=1.0">
    </head>
    <body style="font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif; color: #1f2937; line-height: 1.6; margin: 0; padding: 0;">
        <div style="max-width: 600px; margin: 0 auto; background-color: #f9fafb;">
            <div style="background-color: #1f2937; padding: 30px 20px; text-align: center;">
                <h1 style="margin: 0; font-size: 24px; color: #ffffff;">Your RSVP is Confirmed!</h1>
            </div>
            <div style="padding: 30px 20px; background-color: #ffffff; border: 1px solid #e5e7eb;">
                <p>Dear {guest_name},</p>
                <p>Thank you for confirming your attendance to the Birthday Lunch! We're excited to have you join us for this special celebration.</p>

                <div style="background-color: #f9fafb; padding: 20px; border-radius: 6px; margin: 20px 0; border: 1px solid #e5e7eb;">
                    <h2 style="color: #1f2937; font-size: 20px; margin-top: 0;">Event Details</h2>
                    <p><strong>Date:</strong> {event_date}</p>
                    <p><strong>Time:</strong> {event_time}</p>
                    <p><strong>Venue:</strong> {event_venue}</p>
                    <p><strong>Attire:</strong> {attire}</p>
                    <p><strong>Location:</strong> {event_location}</p>
                </div>

                <p><strong>Important:</strong> This is a <strong>surprise party</strong>, so please keep this information confidential.</p>

                <div style="text-align: center;">
                    <a href="{map_link}" style="display: inline-block; background-color: #1f2937; color: white; text-decoration: none; padding: 12px 24px; border-radius: 6px; margin-top: 20px; font-weight: bold;">
                        View Map Location
                    </a>
                </div>

                <p>If you have any questions or need to update your RSVP, please reply to this email.</p>
                <p>We look forward to seeing you!</p>
            </div>
            <div style="text-align: center; padding: 20px; background-color: #f3f4f6; color: #6b7280; font-size: 0.8em;">
                <p>This is an automated confirmation email.<br>Please do not reply to this message.</p>
            </div>
        </div>
    </body>
    </html>
    """

    GUEST_CONFIRMATION_TEXT = """
    Dear {guest_name},

    Thank you for confirming your attendance to the Birthday Lunch!

    Event Details:
    - Date: {event_date}
    - Time: {event_time}
    - Venue: {event_venue}
    - Attire: {attire}
    - Location: {event_location}

    This is a surprise party, so please keep this information confidential.

    Map: {map_link}

    We look forward to seeing you!
    """

    ADMIN_NOTICE_SUBJECT = "New Birthday Lunch RSVP Received"
    ADMIN_NOTICE_HTML = """
    <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; padding: 20px; border: 1px solid #e0e0e0; border-radius: 5px;">
        <h2 style="color: #333; text-align: center;">New RSVP Received</h2>
        <p><strong>Name:</strong> {guest_name}</p>
        <p><strong>Email:</strong> {guest_email}</p>
        <p><strong>Gender:</strong> {gender}</p>
        <p><strong>Attire Assigned:</strong> {attire}</p>
        <p><strong>Time Submitted:</strong> {submitted_at}</p>
        <hr style="border: none; border-top: 1px solid #e0e0e0; margin: 20px 0;">
        <p style="font-size: 12px; color: #777; text-align: center;">
            This is an automated notification from your Birthday RSVP system.
        </p>
    </div>
    """

    ADMIN_NOTICE_TEXT = """
    New RSVP Received

    Name: {guest_name}
    Email: {guest_email}
    Gender: {gender}
    Attire Assigned: {attire}
    Time Submitted: {submitted_at}
    """
