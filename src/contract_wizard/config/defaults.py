"""Built-in content library.

Stored in the same shape as a library JSON file so that it goes through the
same validation as user-supplied configuration.
"""

DEFAULT_LIBRARY = {
    "version": 1,
    "sections": [
        {
            "id": "parties",
            "label": "Parties Identified",
            "description": "Client and provider names/details included",
            "keywords": ["client", "provider", "contractor", "company", "name"],
            "quick_insert": (
                "PARTIES\n\nThis Agreement is made between:\n\n"
                "SERVICE PROVIDER:\nName: {{providerName}}\nEmail: {{providerEmail}}\n\n"
                "CLIENT:\nName: {{clientName}}\nEmail: {{clientEmail}}\n\n"
            ),
        },
        {
            "id": "scope",
            "label": "Scope of Work",
            "description": "Clear description of what will be delivered",
            "keywords": ["scope", "services", "work", "deliverables", "description"],
            "quick_insert": (
                "SCOPE OF WORK\n\nThe Service Provider agrees to perform:\n\n"
                "{{serviceDescription}}\n\nDELIVERABLES:\n- {{deliverable1}}\n"
                "- {{deliverable2}}\n- {{deliverable3}}\n\n"
            ),
        },
        {
            "id": "timeline",
            "label": "Timeline & Deadlines",
            "description": "Start date, end date, milestones defined",
            "keywords": ["date", "timeline", "deadline", "milestone", "start", "end", "delivery"],
            "quick_insert": (
                "TIMELINE\n\nStart Date: {{startDate}}\nCompletion: {{endDate}}\n\n"
                "MILESTONES:\n1. {{milestone1}} - {{milestone1Date}}\n"
                "2. {{milestone2}} - {{milestone2Date}}\n\n"
            ),
        },
        {
            "id": "payment",
            "label": "Payment Terms",
            "description": "Total amount, deposit, payment schedule",
            "keywords": ["payment", "amount", "deposit", "fee", "rate", "price", "compensation"],
            "quick_insert": (
                "PAYMENT TERMS\n\nTotal Fee: ${{totalAmount}}\n\nPayment Schedule:\n"
                "- Deposit (50%): ${{depositAmount}} - Due upon signing\n"
                "- Final (50%): Due upon completion\n\nLate Fee: {{lateFee}}% per month\n\n"
            ),
        },
        {
            "id": "revisions",
            "label": "Revision Policy",
            "description": "Number of revisions included, additional revision costs",
            "keywords": ["revision", "changes", "modifications", "rounds"],
            "quick_insert": (
                "REVISIONS\n\n{{revisionCount}} revision rounds included.\n"
                "Additional revisions: ${{revisionRate}}/hour.\n\n"
            ),
        },
        {
            "id": "ownership",
            "label": "Ownership/IP Rights",
            "description": "Who owns the final work product",
            "keywords": ["ownership", "intellectual property", "rights", "ip", "copyright"],
            "quick_insert": (
                "INTELLECTUAL PROPERTY\n\nUpon full payment, all deliverables become "
                "Client property.\nService Provider retains portfolio rights.\n\n"
            ),
        },
        {
            "id": "confidentiality",
            "label": "Confidentiality",
            "description": "Protection of sensitive information",
            "keywords": ["confidential", "nda", "secret", "private", "proprietary"],
            "quick_insert": (
                "CONFIDENTIALITY\n\nBoth parties agree to keep confidential all business "
                "information, trade secrets, and proprietary data shared during this "
                "engagement.\n\n"
            ),
        },
        {
            "id": "termination",
            "label": "Termination Clause",
            "description": "How either party can end the agreement",
            "keywords": ["termination", "cancel", "end", "terminate"],
            "quick_insert": (
                "TERMINATION\n\nEither party may terminate with {{noticePeriod}} days "
                "written notice.\nUpon termination, Client pays for completed work.\n\n"
            ),
        },
        {
            "id": "liability",
            "label": "Liability Limits",
            "description": "Cap on damages and exclusions",
            "keywords": ["liability", "damages", "limitation", "responsible"],
            "quick_insert": (
                "LIMITATION OF LIABILITY\n\nTotal liability shall not exceed the amount "
                "paid under this agreement.\nNeither party liable for indirect or "
                "consequential damages.\n\n"
            ),
        },
        {
            "id": "signatures",
            "label": "Signature Block",
            "description": "Space for both parties to sign",
            "keywords": ["signature", "sign", "agreed", "accepted", "date"],
            "quick_insert": (
                "\n---\n\nAGREED AND ACCEPTED:\n\n"
                "Provider: _________________________ Date: _________\n\n"
                "Client: _________________________ Date: _________\n"
            ),
        },
    ],
    "snippets": [
        {
            "id": "header",
            "name": "Contract Header",
            "snippet": (
                "CONTRACT AGREEMENT\n\nThis Agreement is entered into as of {{date}} "
                "between:\n\nService Provider: {{providerName}}\nClient: {{clientName}}"
                "\n\n---\n\n"
            ),
        },
        {
            "id": "services",
            "name": "Services Section",
            "snippet": (
                "SERVICES\n\nThe Service Provider agrees to provide the following "
                "services:\n\n{{serviceDescription}}\n\nDeliverables:\n- {{deliverable1}}"
                "\n- {{deliverable2}}\n- {{deliverable3}}\n\n"
            ),
        },
        {
            "id": "payment",
            "name": "Payment Terms",
            "snippet": (
                "PAYMENT TERMS\n\nTotal Amount: ${{totalAmount}}\nDeposit Required: "
                "${{depositAmount}}\n\nPayment Schedule:\n- Deposit due upon signing\n"
                "- Remaining balance due upon completion\n\nPayment Methods: Credit Card, "
                "Bank Transfer, or Check\n\n"
            ),
        },
        {
            "id": "timeline",
            "name": "Timeline & Milestones",
            "snippet": (
                "TIMELINE\n\nProject Start Date: {{startDate}}\nEstimated Completion: "
                "{{endDate}}\n\nMilestones:\n1. {{milestone1}} - Due: {{milestone1Date}}\n"
                "2. {{milestone2}} - Due: {{milestone2Date}}\n\n"
            ),
        },
        {
            "id": "signature",
            "name": "Signature Block",
            "snippet": (
                "\n---\n\nAGREED AND ACCEPTED:\n\nService Provider:\nSignature: "
                "_________________________\nName: {{providerName}}\nDate: "
                "_________________________\n\nClient:\nSignature: "
                "_________________________\nName: {{clientName}}\nDate: "
                "_________________________\n"
            ),
        },
    ],
    "legal_clauses": [
        {
            "id": "confidentiality",
            "name": "Confidentiality",
            "text": (
                "\nCONFIDENTIALITY\n\nBoth parties agree to keep confidential all "
                "proprietary information, trade secrets, and business information "
                "disclosed during the course of this agreement. This obligation shall "
                "survive the termination of this agreement.\n"
            ),
        },
        {
            "id": "ip",
            "name": "Intellectual Property",
            "text": (
                "\nINTELLECTUAL PROPERTY\n\nUpon full payment, all intellectual property "
                "rights to the deliverables shall transfer to the Client. The Service "
                "Provider retains the right to use the work in their portfolio unless "
                "otherwise agreed in writing.\n"
            ),
        },
        {
            "id": "termination",
            "name": "Termination",
            "text": (
                "\nTERMINATION\n\nEither party may terminate this agreement with 30 days "
                "written notice. In case of termination, the Client shall pay for all "
                "work completed up to the termination date. Any deposits paid are "
                "non-refundable.\n"
            ),
        },
        {
            "id": "liability",
            "name": "Limitation of Liability",
            "text": (
                "\nLIMITATION OF LIABILITY\n\nThe Service Provider's total liability "
                "under this agreement shall not exceed the total amount paid by the "
                "Client. Neither party shall be liable for indirect, incidental, or "
                "consequential damages.\n"
            ),
        },
        {
            "id": "force_majeure",
            "name": "Force Majeure",
            "text": (
                "\nFORCE MAJEURE\n\nNeither party shall be liable for delays or failures "
                "in performance resulting from circumstances beyond their reasonable "
                "control, including but not limited to natural disasters, war, "
                "terrorism, or government actions.\n"
            ),
        },
        {
            "id": "warranty_disclaimer",
            "name": "Warranty Disclaimer",
            "text": (
                "\nWARRANTY DISCLAIMER\n\nServices provided \"AS IS\" without warranty. "
                "Limited warranty: deliverables will substantially conform to "
                "specifications for {{warrantyPeriod}} from delivery. Does NOT cover: "
                "client modifications, third-party issues, or misuse.\n"
            ),
        },
        {
            "id": "refund_policy",
            "name": "Refund Policy",
            "text": (
                "\nREFUND POLICY\n\nDeposit is non-refundable once work begins. "
                "Cancellation before work: full refund minus admin fee. After work "
                "begins: no refund, client pays for completed work. Disputes must be "
                "raised within {{disputeWindow}} days.\n"
            ),
        },
        {
            "id": "cancellation",
            "name": "Cancellation Policy",
            "text": (
                "\nCANCELLATION POLICY\n\nClient cancellation: 30+ days notice = deposit "
                "refunded minus fee. 14-30 days = 50% deposit refunded. Less than 14 "
                "days = no refund. Provider cancellation: full refund of unused "
                "payments.\n"
            ),
        },
        {
            "id": "payment_terms",
            "name": "Payment Terms",
            "text": (
                "\nPAYMENT TERMS\n\nAccepted: Credit Card, Bank Transfer, Check. Late "
                "payments: {{gracePeriod}} day grace, then {{lateFeePercent}}% monthly "
                "fee. Work paused after {{pauseDays}} days overdue. Client pays "
                "collection costs.\n"
            ),
        },
        {
            "id": "scope_changes",
            "name": "Scope Changes",
            "text": (
                "\nSCOPE CHANGES\n\nChanges outside original scope require written "
                "change order. Changes may affect timeline and cost. Rush changes incur "
                "additional fees. Change order fee: ${{changeOrderFee}}.\n"
            ),
        },
        {
            "id": "acceptance",
            "name": "Acceptance",
            "text": (
                "\nACCEPTANCE\n\nClient has {{reviewPeriod}} business days to review "
                "deliverables. Deemed accepted if: written approval given, no response "
                "within review period, or deliverable used in production.\n"
            ),
        },
        {
            "id": "data_privacy",
            "name": "Data Privacy",
            "text": (
                "\nDATA PRIVACY\n\nProvider collects only necessary project data. Data "
                "used solely for providing services. Provider implements reasonable "
                "security. Data retained {{retentionPeriod}} after project, then "
                "deleted.\n"
            ),
        },
    ],
    "payment_terms": [
        {
            "id": "net30",
            "label": "Net 30",
            "template": (
                "Payment Terms: Net 30 days from invoice date. Invoice will be issued "
                "upon completion/delivery of services."
            ),
        },
        {
            "id": "net15",
            "label": "Net 15",
            "template": (
                "Payment Terms: Net 15 days from invoice date. Payment is due within "
                "15 days of invoice issuance."
            ),
        },
        {
            "id": "due_on_completion",
            "label": "Due on Completion",
            "template": (
                "Payment is due upon completion and acceptance of all deliverables. "
                "Client has 7 business days to review and approve work before payment "
                "is due."
            ),
        },
        {
            "id": "50_50_split",
            "label": "50/50 Split",
            "template": (
                "Payment Schedule:\n- 50% deposit due upon signing this agreement\n"
                "- 50% final payment due upon completion and acceptance of all "
                "deliverables"
            ),
        },
        {
            "id": "milestone_payments",
            "label": "Milestone Payments",
            "template": (
                "Payment Schedule:\n- 50% deposit due upon signing\n- 30% upon milestone "
                "completion (as specified in project timeline)\n- 20% upon final "
                "delivery and acceptance"
            ),
        },
        {
            "id": "three_payments",
            "label": "Three Payments",
            "template": (
                "Payment Schedule:\n- 33% deposit due upon signing\n- 33% at project "
                "midpoint\n- 34% upon final delivery and acceptance"
            ),
        },
        {
            "id": "late_fees",
            "label": "Late Fees",
            "template": (
                "Late Payment Fee: 1.5% per month (18% annually) will be charged on any "
                "overdue amounts. Payments are considered late if not received within "
                "the specified payment terms."
            ),
        },
        {
            "id": "payment_methods",
            "label": "Payment Methods",
            "template": (
                "Accepted Payment Methods: Credit Card, Bank Transfer (ACH), Check, Wire "
                "Transfer. Payment details and instructions will be provided upon "
                "invoicing."
            ),
        },
        {
            "id": "refund_policy",
            "label": "Refund Policy",
            "template": (
                "Refund Policy: Deposit is non-refundable once work has commenced. If "
                "work is canceled before commencement, deposit will be refunded minus a "
                "10% processing fee. No refunds will be provided after work has been "
                "completed and delivered."
            ),
        },
        {
            "id": "no_refund",
            "label": "No Refund",
            "template": (
                "All payments are non-refundable. Once payment is made and work "
                "commences, no refunds will be provided under any circumstances."
            ),
        },
        {
            "id": "dispute_resolution",
            "label": "Payment Disputes",
            "template": (
                "Payment Disputes: Any disputes regarding invoices must be raised in "
                "writing within 14 days of invoice date. Work may be paused during "
                "dispute resolution. If dispute is resolved in favor of Service "
                "Provider, late fees apply from original due date."
            ),
        },
        {
            "id": "collection_costs",
            "label": "Collection Costs",
            "template": (
                "Collection Costs: Client agrees to pay all reasonable collection costs, "
                "including attorney fees and court costs, incurred in collecting any "
                "overdue payments."
            ),
        },
        {
            "id": "work_suspension",
            "label": "Work Suspension",
            "template": (
                "Work Suspension: Service Provider reserves the right to suspend work if "
                "payment is more than 15 days overdue. Work will resume upon receipt of "
                "payment plus any applicable late fees. Timeline may be adjusted "
                "accordingly."
            ),
        },
        {
            "id": "retainage",
            "label": "Retainage",
            "template": (
                "Retainage: 10% of contract value will be retained until 30 days after "
                "final delivery and acceptance to ensure all work is completed to "
                "satisfaction and any issues are resolved."
            ),
        },
        {
            "id": "grace_period",
            "label": "Grace Period",
            "template": (
                "Grace Period: A 5-day grace period applies after the payment due date "
                "before late fees are assessed. Client will receive written notice "
                "before late fees are applied."
            ),
        },
        {
            "id": "payment_upon_approval",
            "label": "Payment on Approval",
            "template": (
                "Payment is due within 7 days of Client's written approval of "
                "deliverables. If Client fails to provide approval or feedback within "
                "14 days, deliverables will be deemed approved and payment will be due "
                "immediately."
            ),
        },
    ],
    "legal_terms": [
        {
            "key": "indemnification",
            "term": "Indemnification",
            "definition": (
                "A contractual obligation where one party agrees to compensate the other "
                "for certain damages or losses."
            ),
            "example": (
                "If a client sues you for using copyrighted material they provided, an "
                "indemnification clause means they cover your legal costs."
            ),
        },
        {
            "key": "force majeure",
            "term": "Force Majeure",
            "definition": (
                "A clause that frees both parties from liability when an extraordinary "
                "event beyond their control prevents fulfillment of obligations."
            ),
            "example": (
                "Natural disasters, wars, pandemics, or government actions that make it "
                "impossible to complete the work."
            ),
        },
        {
            "key": "limitation of liability",
            "term": "Limitation of Liability",
            "definition": (
                "A clause that caps the maximum amount one party can be held responsible "
                "for if something goes wrong."
            ),
            "example": (
                "Limiting liability to the total contract value means you cannot be sued "
                "for more than what you were paid."
            ),
        },
        {
            "key": "intellectual property",
            "term": "Intellectual Property (IP)",
            "definition": (
                "Legal rights to creations of the mind including designs, code, artwork, "
                "and written content."
            ),
            "example": (
                "Specifies whether the client owns the final work, or if you retain "
                "rights to reuse components."
            ),
        },
        {
            "key": "confidentiality",
            "term": "Confidentiality / NDA",
            "definition": (
                "An agreement to keep certain information private and not share it with "
                "third parties."
            ),
            "example": (
                "Client business strategies, pricing, customer lists, or trade secrets "
                "must be kept secret."
            ),
        },
        {
            "key": "termination",
            "term": "Termination",
            "definition": (
                "The conditions under which either party can end the contract before "
                "completion."
            ),
            "example": (
                "Either party can end the contract with 30 days notice, or immediately if "
                "the other party breaches the agreement."
            ),
        },
        {
            "key": "dispute resolution",
            "term": "Dispute Resolution",
            "definition": (
                "The agreed-upon method for resolving disagreements, such as mediation, "
                "arbitration, or litigation."
            ),
            "example": (
                "Parties agree to try mediation first before going to court, saving time "
                "and legal fees."
            ),
        },
        {
            "key": "governing law",
            "term": "Governing Law",
            "definition": (
                "Specifies which jurisdiction's laws will apply to interpret and enforce "
                "the contract."
            ),
            "example": (
                "This agreement is governed by the laws of California - any disputes "
                "would use CA law."
            ),
        },
        {
            "key": "scope of work",
            "term": "Scope of Work",
            "definition": (
                "A detailed description of what work will be performed, deliverables, "
                "and boundaries of the project."
            ),
            "example": (
                "Includes 5 web pages, logo design, and mobile responsive layout. Does "
                "NOT include ongoing maintenance."
            ),
        },
        {
            "key": "deliverables",
            "term": "Deliverables",
            "definition": (
                "The tangible items or outputs that will be provided upon completion of "
                "the work."
            ),
            "example": "Final website files, source code, design assets, and documentation.",
        },
    ],
    "misspellings": {
        "recieve": "receive",
        "seperate": "separate",
        "occured": "occurred",
        "accomodate": "accommodate",
        "definately": "definitely",
        "neccessary": "necessary",
        "acheive": "achieve",
        "beleive": "believe",
        "calender": "calendar",
        "commitee": "committee",
        "concensus": "consensus",
        "embarass": "embarrass",
        "enviroment": "environment",
        "existance": "existence",
        "foriegn": "foreign",
        "goverment": "government",
        "harrass": "harass",
        "independant": "independent",
        "judgement": "judgment",
        "knowlege": "knowledge",
        "liason": "liaison",
        "maintainance": "maintenance",
        "mispell": "misspell",
        "noticable": "noticeable",
        "paralell": "parallel",
        "priviledge": "privilege",
        "publically": "publicly",
        "recomend": "recommend",
        "refered": "referred",
        "relevent": "relevant",
        "responsability": "responsibility",
        "succesful": "successful",
        "supercede": "supersede",
        "threshhold": "threshold",
        "transfered": "transferred",
        "untill": "until",
        "wierd": "weird",
        "writting": "writing",
        "agreeement": "agreement",
        "contractt": "contract",
        "payemnt": "payment",
        "clinet": "client",
        "servies": "services",
        "deliverbles": "deliverables",
    },
}
