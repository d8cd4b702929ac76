"""
Fixed assistant texts served by the API.

These are the strings the chat surfaces need server-side: fallback replies,
the hotel widget greeting, the /looking suggestion and the read-only example
chats shown in the sidebar.
"""

from typing import List

from src.domain.entities.chat import Chat
from src.domain.entities.message import Message
from src.domain.value_objects.chat_id import ChatId, now_millis
from src.domain.value_objects.language import Language


CHAT_ERROR_REPLY = (
    "Entschuldigung, es gab einen Fehler bei der Verarbeitung Ihrer Anfrage."
)

HOTEL_WELCOME = {
    Language.DE: "Hallo! Wie kann ich Ihnen bei Ihrer Buchung helfen?",
    Language.EN: "Hello! How can I help you with your booking today?",
}

LOOKING_PREVIEW = {
    Language.DE: (
        "Ich suche nach einem Hotelzimmer für 2 Personen in Obertauern "
        "vom 03.12.2025 bis zum 11.12.2025"
    ),
    Language.EN: (
        "I am looking for a hotel room for 2 people in Obertauern "
        "from 03.12.2025 to 11.12.2025"
    ),
}

BOOKING_NEXT_STEPS = {
    Language.DE: [
        "Bestätigungs-E-Mail wurde an Ihre E-Mail-Adresse gesendet",
        "Das Hotel wird Sie in Kürze kontaktieren",
    ],
    Language.EN: [
        "Confirmation email has been sent to your email address",
        "The hotel will contact you shortly",
    ],
}

# (title, user question, assistant answer)
_EXAMPLES = {
    Language.DE: [
        (
            "Hotelsuche in Obertauern starten",
            "Wie funktioniert die Hotelsuche mit /looking?",
            "Mit dem /looking Befehl können Sie ganz einfach Hotels in Obertauern finden!\n\n"
            "So geht's:\n1. Tippen Sie /looking\n2. Geben Sie Ihre Wünsche ein\n\n"
            "Beispiel:\n/looking für ein Hotelzimmer in Obertauern für 2 Erwachsene "
            "vom 17.12.2025 bis 24.12.2025\n\n"
            "Der Assistent durchsucht automatisch alle verfügbaren Hotels und zeigt "
            "Ihnen die besten Optionen!",
        ),
        (
            "Beste Preise finden",
            "Wie finde ich die günstigsten Hotels in Obertauern?",
            "Mit /looking erhalten Sie automatisch einen Preisvergleich!\n\n"
            "Das System:\n• Vergleicht alle verfügbaren Hotels in Obertauern\n"
            "• Zeigt Ihnen Preise pro Nacht\n• Berücksichtigt Ihre Reisedaten\n"
            "• Findet die besten Angebote\n\n"
            "Tipp: Probieren Sie verschiedene Daten aus, um noch bessere Preise zu finden!",
        ),
        (
            "Verfügbarkeit prüfen & buchen",
            "Wie buche ich ein Hotel in Obertauern?",
            "So buchen Sie ganz einfach:\n\n"
            "1. Suche starten:\n/looking Hotelzimmer in Obertauern für 2 Personen "
            "vom 17.12. bis 24.12.2025\n\n"
            "2. Angebote prüfen:\nDas System zeigt verfügbare Hotels mit Preisen\n\n"
            "3. Hotel auswählen:\nKlicken Sie auf Ihr Wunschhotel\n\n"
            "4. Buchung bestätigen:\nFüllen Sie Ihre Daten aus und schließen Sie die "
            "Buchung ab\n\nPerfekt für Ihren Skiurlaub in Obertauern!",
        ),
    ],
    Language.EN: [
        (
            "Start Hotel Search in Obertauern",
            "How does hotel search with /looking work?",
            "With the /looking command you can easily find hotels in Obertauern!\n\n"
            "Here's how:\n1. Type /looking\n2. Enter your preferences\n\n"
            "Example:\n/looking for a hotel room in Obertauern for 2 adults "
            "from 17.12.2025 to 24.12.2025\n\n"
            "The assistant automatically searches all available hotels and shows you "
            "the best options!",
        ),
        (
            "Find Best Prices",
            "How do I find the cheapest hotels in Obertauern?",
            "With /looking you automatically get a price comparison!\n\n"
            "The system:\n• Compares all available hotels in Obertauern\n"
            "• Shows you prices per night\n• Considers your travel dates\n"
            "• Finds the best deals\n\n"
            "Tip: Try different dates to find even better prices!",
        ),
        (
            "Check Availability & Book",
            "How do I book a hotel in Obertauern?",
            "Book easily:\n\n"
            "1. Start search:\n/looking hotel room in Obertauern for 2 people "
            "from Dec 17 to Dec 24, 2025\n\n"
            "2. Check offers:\nSystem shows available hotels with prices\n\n"
            "3. Select hotel:\nClick on your preferred hotel\n\n"
            "4. Confirm booking:\nFill in your details and complete the booking\n\n"
            "Perfect for your ski vacation in Obertauern!",
        ),
    ],
}

_HOUR_MS = 3600 * 1000


def example_chats(language: Language = Language.DE) -> List[Chat]:
    """Build the sidebar examples, stamped one, two and three hours ago."""
    now = now_millis()
    return [
        Chat(
            id=ChatId.example(number),
            title=title,
            messages=[
                Message.user_message(question),
                Message.assistant_message(answer),
            ],
            timestamp=now - number * _HOUR_MS,
        )
        for number, (title, question, answer) in enumerate(_EXAMPLES[language], 1)
    ]
