"""
Trigram profiles for the supported languages.

Each profile is built once at import from a short reference corpus: the corpus is
normalised, split into character trigrams and the PROFILE_SIZE most frequent
trigrams are kept with their rank (0 = most frequent).
"""
from __future__ import annotations

import re
from collections import Counter
from typing import Dict, List

PROFILE_SIZE = 300

_NON_LETTERS_RE = re.compile(r"[\W\d_]+")

CORPORA: Dict[str, str] = {
    "eng": """
        The city is hosting a summer festival in the park with music, food and art for the whole family.
        This event is one of the most popular in the region and it brings thousands of visitors every year.
        There will be a concert on the main stage in the evening, and the gallery opens a new exhibition
        of contemporary painting and photography. Tickets are available online and at the entrance.
        Please note that the meeting point has changed and the workshop will now start at the library.
        We would like to thank all volunteers who have helped with the organisation of this wonderful day.
        The theatre presents a new production that tells the story of a young woman and her family.
        You can explore local wines and cuisine, join a guided walk through the old town, or simply relax
        by the river. Children should be accompanied by an adult at all times. The market is open from
        morning until late at night, and there are many stalls selling fresh bread, cheese and flowers.
        It should be easy to find the venue because it is next to the station and there is parking nearby.
        This is a test of the system and it should correctly identify the language of this text.
        Information about the programme, the speakers and the schedule will be published on the website.
        Our community centre offers courses for beginners and advanced students throughout the year.
    """,
    "deu": """
        Die Stadt veranstaltet im Sommer ein Festival im Park mit Musik, Essen und Kunst für die ganze Familie.
        Diese Veranstaltung ist eine der beliebtesten in der Region und zieht jedes Jahr tausende Besucher an.
        Am Abend gibt es ein Konzert auf der großen Bühne, und die Galerie eröffnet eine neue Ausstellung
        zeitgenössischer Malerei und Fotografie. Eintrittskarten sind online und an der Kasse erhältlich.
        Bitte beachten Sie, dass sich der Treffpunkt geändert hat und der Workshop jetzt in der Bibliothek beginnt.
        Wir möchten uns bei allen Helfern bedanken, die bei der Organisation dieses wunderbaren Tages geholfen haben.
        Das Theater zeigt eine neue Inszenierung, die die Geschichte einer jungen Frau und ihrer Familie erzählt.
        Entdecken Sie lokale Weine und Küche, machen Sie eine Führung durch die Altstadt oder entspannen Sie
        einfach am Fluss. Kinder müssen jederzeit von einem Erwachsenen begleitet werden. Der Markt ist vom
        Morgen bis spät in die Nacht geöffnet, und es gibt viele Stände mit frischem Brot, Käse und Blumen.
        Der Veranstaltungsort ist leicht zu finden, weil er neben dem Bahnhof liegt und es dort Parkplätze gibt.
        Dies ist ein Test des Systems und es sollte die Sprache dieses Textes richtig erkennen.
        Informationen über das Programm, die Redner und den Zeitplan werden auf der Webseite veröffentlicht.
        Unser Gemeindezentrum bietet das ganze Jahr über Kurse für Anfänger und Fortgeschrittene an.
        Ein schönes Konzert mit klassischer Musik im Stadtpark, nicht weit von der Kirche und dem Rathaus.
    """,
    "fra": """
        La ville organise un festival d'été dans le parc avec de la musique, de la cuisine et de l'art pour toute la famille.
        Cet événement est l'un des plus populaires de la région et il attire chaque année des milliers de visiteurs.
        Il y aura un concert sur la grande scène le soir, et la galerie ouvre une nouvelle exposition
        de peinture et de photographie contemporaines. Les billets sont disponibles en ligne et à l'entrée.
        Veuillez noter que le point de rendez-vous a changé et que l'atelier commencera maintenant à la bibliothèque.
        Nous tenons à remercier tous les bénévoles qui ont aidé à l'organisation de cette merveilleuse journée.
        Le théâtre présente une nouvelle création qui raconte l'histoire d'une jeune femme et de sa famille.
        Vous pouvez découvrir les vins et la cuisine de la région, suivre une visite guidée de la vieille ville
        ou simplement vous détendre au bord de la rivière. Les enfants doivent être accompagnés d'un adulte.
        Le marché est ouvert du matin jusque tard dans la nuit, avec de nombreux stands de pain, de fromage et de fleurs.
        Le lieu est facile à trouver parce qu'il se trouve à côté de la gare et qu'il y a un parking.
        Ceci est un test du système et il devrait identifier correctement la langue de ce texte.
        Les informations sur le programme, les intervenants et le calendrier seront publiées sur le site.
        Notre centre propose des cours pour les débutants et les élèves avancés pendant toute l'année.
    """,
    "spa": """
        La ciudad organiza un festival de verano en el parque con música, comida y arte para toda la familia.
        Este evento es uno de los más populares de la región y cada año atrae a miles de visitantes.
        Habrá un concierto en el escenario principal por la noche, y la galería abre una nueva exposición
        de pintura y fotografía contemporánea. Las entradas están disponibles en línea y en la taquilla.
        Tenga en cuenta que el punto de encuentro ha cambiado y que el taller empezará ahora en la biblioteca.
        Queremos dar las gracias a todos los voluntarios que han ayudado en la organización de este día maravilloso.
        El teatro presenta una nueva obra que cuenta la historia de una mujer joven y de su familia.
        Puede descubrir los vinos y la cocina de la zona, hacer una visita guiada por el casco antiguo
        o simplemente descansar junto al río. Los niños deben estar acompañados por un adulto en todo momento.
        El mercado está abierto desde la mañana hasta muy tarde, con muchos puestos de pan, queso y flores.
        El lugar es fácil de encontrar porque está al lado de la estación y hay aparcamiento cerca.
        Esta es una prueba del sistema y debería identificar correctamente el idioma de este texto.
        La información sobre el programa, los ponentes y el horario se publicará en la página web.
        Nuestro centro ofrece cursos para principiantes y estudiantes avanzados durante todo el año.
    """,
    "ita": """
        La città organizza un festival estivo nel parco con musica, cibo e arte per tutta la famiglia.
        Questo evento è uno dei più popolari della regione e ogni anno attira migliaia di visitatori.
        Ci sarà un concerto sul palco principale la sera, e la galleria apre una nuova mostra
        di pittura e fotografia contemporanea. I biglietti sono disponibili online e all'ingresso.
        Si prega di notare che il punto di incontro è cambiato e che il laboratorio inizierà nella biblioteca.
        Vogliamo ringraziare tutti i volontari che hanno aiutato nell'organizzazione di questa giornata meravigliosa.
        Il teatro presenta un nuovo spettacolo che racconta la storia di una giovane donna e della sua famiglia.
        Potete scoprire i vini e la cucina del territorio, fare una visita guidata del centro storico
        oppure semplicemente rilassarvi lungo il fiume. I bambini devono essere sempre accompagnati da un adulto.
        Il mercato è aperto dalla mattina fino a tarda notte, con molte bancarelle di pane, formaggio e fiori.
        Il luogo è facile da trovare perché si trova accanto alla stazione e c'è un parcheggio vicino.
        Questo è un test del sistema e dovrebbe identificare correttamente la lingua di questo testo.
        Le informazioni sul programma, sui relatori e sugli orari saranno pubblicate sul sito.
        Il nostro centro offre corsi per principianti e studenti avanzati durante tutto l'anno.
    """,
    "nld": """
        De stad organiseert een zomerfestival in het park met muziek, eten en kunst voor het hele gezin.
        Dit evenement is een van de populairste in de regio en trekt elk jaar duizenden bezoekers.
        Er is 's avonds een concert op het grote podium, en de galerie opent een nieuwe tentoonstelling
        van hedendaagse schilderkunst en fotografie. Kaartjes zijn online en bij de ingang verkrijgbaar.
        Let op dat het ontmoetingspunt is veranderd en dat de workshop nu in de bibliotheek begint.
        Wij willen alle vrijwilligers bedanken die hebben geholpen bij de organisatie van deze prachtige dag.
        Het theater brengt een nieuwe voorstelling die het verhaal vertelt van een jonge vrouw en haar familie.
        U kunt de lokale wijnen en keuken ontdekken, een rondleiding door de oude binnenstad volgen
        of gewoon ontspannen aan de rivier. Kinderen moeten altijd worden begeleid door een volwassene.
        De markt is open van de ochtend tot laat in de avond, met veel kramen met vers brood, kaas en bloemen.
        De locatie is gemakkelijk te vinden omdat het naast het station ligt en er parkeerplaatsen zijn.
        Dit is een test van het systeem en het zou de taal van deze tekst correct moeten herkennen.
        Informatie over het programma, de sprekers en het schema wordt op de website gepubliceerd.
        Ons buurthuis biedt het hele jaar door cursussen voor beginners en gevorderden.
    """,
    "por": """
        A cidade organiza um festival de verão no parque com música, comida e arte para toda a família.
        Este evento é um dos mais populares da região e todos os anos atrai milhares de visitantes.
        Haverá um concerto no palco principal à noite, e a galeria abre uma nova exposição
        de pintura e fotografia contemporânea. Os bilhetes estão disponíveis na internet e na bilheteria.
        Por favor, note que o ponto de encontro mudou e que a oficina vai começar agora na biblioteca.
        Queremos agradecer a todos os voluntários que ajudaram na organização deste dia maravilhoso.
        O teatro apresenta uma nova peça que conta a história de uma mulher jovem e da sua família.
        Você pode descobrir os vinhos e a culinária da região, fazer uma visita guiada pelo centro histórico
        ou simplesmente descansar à beira do rio. As crianças devem estar sempre acompanhadas por um adulto.
        O mercado está aberto desde a manhã até tarde da noite, com muitas bancas de pão, queijo e flores.
        O local é fácil de encontrar porque fica ao lado da estação e há estacionamento perto.
        Este é um teste do sistema e deveria identificar corretamente o idioma deste texto.
        As informações sobre o programa, os palestrantes e o horário serão publicadas no site.
        O nosso centro oferece cursos para iniciantes e alunos avançados durante todo o ano.
    """,
}


def normalize_text(text: str) -> str:
    """Lowercase and keep letters only, single-space separated."""
    return _NON_LETTERS_RE.sub(" ", text.lower()).strip()


def trigrams(text: str) -> List[str]:
    cleaned = normalize_text(text)
    if not cleaned:
        return []
    padded = f" {cleaned} "
    return [padded[i:i + 3] for i in range(len(padded) - 2)]


def ranked_trigrams(text: str, limit: int = 0) -> Dict[str, int]:
    """Trigram -> rank by descending frequency (ties broken alphabetically)."""
    counts = Counter(trigrams(text))
    ordered = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    if limit:
        ordered = ordered[:limit]
    return {gram: rank for rank, (gram, _) in enumerate(ordered)}


PROFILES: Dict[str, Dict[str, int]] = {
    code: ranked_trigrams(corpus, PROFILE_SIZE) for code, corpus in CORPORA.items()
}
